from payforblob.blob.types import Blob

V0_PREFIX = b"\x00" * 18


def v0_id(sub_id: bytes) -> bytes:
    """28-byte version-0 namespace ID with `sub_id` right-aligned."""
    return V0_PREFIX + b"\x00" * (10 - len(sub_id)) + sub_id


def make_blob(data: bytes = b"hello", sub_id: bytes = b"\x01" * 10, share_version: int = 0) -> Blob:
    return Blob(namespace_id=v0_id(sub_id), data=data, share_version=share_version, namespace_version=0)
