"""
payforblob • Shares - share versions

`ShareVersion` is the closed set of share encodings this package can
produce. Each member knows how to split a blob into shares; adding a
version means adding a member and its splitter here.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Dict, List

from ..errors import UnsupportedShareVersion
from ..utils.bytes import BytesLike
from .share import Share, build_sparse_shares


class ShareVersion(IntEnum):
    V0 = 0

    @classmethod
    def parse(cls, value: int) -> "ShareVersion":
        """Map a wire tag onto a member or raise `UnsupportedShareVersion`."""
        try:
            return cls(int(value))
        except (TypeError, ValueError) as e:
            raise UnsupportedShareVersion(
                f"share version {value!r} is not supported",
                data={"shareVersion": value, "supported": [int(v) for v in cls]},
            ) from e

    def split(self, namespace: BytesLike, data: BytesLike) -> List[Share]:
        return _SPLITTERS[self](namespace, data)


def _split_v0(namespace: BytesLike, data: BytesLike) -> List[Share]:
    return build_sparse_shares(namespace, ShareVersion.V0, data)


_SPLITTERS: Dict[ShareVersion, Callable[[BytesLike, BytesLike], List[Share]]] = {
    ShareVersion.V0: _split_v0,
}


__all__ = ["ShareVersion"]
