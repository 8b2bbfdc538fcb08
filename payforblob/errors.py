"""
payforblob errors.

Typed exception hierarchy with stable, machine-readable metadata so that a
transaction-submission layer can map every failure to a documented code.

Usage:

    from payforblob.errors import ReservedNamespace, BlobError

    try:
        msg.validate_basic()
    except BlobError as e:
        codespace, code, log = e.abci_info()

All errors expose:
- .code       : stable snake_case code
- .codespace  : module codespace ("blob", or "sdk" for address errors)
- .abci_code  : stable integer code within the codespace
- .status     : suggested HTTP status (int)
- .data       : optional structured payload (dict-like)
- .to_problem() : RFC 7807-compatible dict for JSON responses
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

CODESPACE_BLOB = "blob"
CODESPACE_SDK = "sdk"


class BlobError(Exception):
    """
    Base class for all payforblob errors.

    Subclasses set `default_code`, `default_abci_code` and, where it differs,
    `codespace` / `default_status`.
    """

    default_code = "blob_error"
    default_abci_code = 1
    default_status = 400
    codespace = CODESPACE_BLOB

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        status: Optional[int] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.abci_code = self.default_abci_code
        self.status = int(status if status is not None else self.default_status)
        self.data: Dict[str, Any] = dict(data) if data else {}

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.message:
            return f"{self.code}: {self.message}"
        return self.code

    def abci_info(self) -> Tuple[str, int, str]:
        """Return (codespace, abci_code, log) as reported to the chain."""
        return self.codespace, self.abci_code, str(self)

    def to_problem(self) -> Dict[str, Any]:
        """
        Render as an RFC 7807 "problem detail" object.
        """
        return {
            "type": f"urn:payforblob:{self.codespace}:{self.code}",
            "title": self.code.replace("_", " ").title(),
            "status": self.status,
            "detail": self.message or None,
            "abciCode": self.abci_code,
            "data": self.data or None,
        }


# ------------------------------- namespaces ---------------------------------


class ReservedNamespace(BlobError):
    """Namespace is one of the protocol-reserved namespaces."""

    default_code = "reserved_namespace"
    default_abci_code = 11110


class InvalidNamespace(BlobError):
    """Namespace bytes are malformed (length, version-0 prefix)."""

    default_code = "invalid_namespace"
    default_abci_code = 11134


class InvalidNamespaceVersion(BlobError):
    """Namespace version is not supported for blobs."""

    default_code = "invalid_namespace_version"
    default_abci_code = 11135


UnsupportedNamespaceVersion = InvalidNamespaceVersion


# ------------------------------- blobs --------------------------------------


class EmptyBlob(BlobError):
    default_code = "zero_blob_size"
    default_abci_code = 11122


class UnsupportedShareVersion(BlobError):
    default_code = "unsupported_share_version"
    default_abci_code = 11121


class NoBlobs(BlobError):
    default_code = "no_blobs"
    default_abci_code = 11129


# ------------------------------- message ------------------------------------


class InvalidShareCommitment(BlobError):
    """Share commitment is missing or is not exactly 32 bytes."""

    default_code = "invalid_share_commitment"
    default_abci_code = 11116


class NoNamespaces(BlobError):
    default_code = "no_namespaces"
    default_abci_code = 11130


class NoShareVersions(BlobError):
    default_code = "no_share_versions"
    default_abci_code = 11131


class NoBlobSizes(BlobError):
    default_code = "no_blob_sizes"
    default_abci_code = 11132


class NoShareCommitments(BlobError):
    default_code = "no_share_commitments"
    default_abci_code = 11133


class MismatchedArrayLengths(BlobError):
    """The parallel arrays of a MsgPayForBlobs disagree in length."""

    default_code = "mismatched_array_lengths"
    default_abci_code = 11128


class InvalidAddress(BlobError):
    default_code = "invalid_address"
    default_abci_code = 7
    codespace = CODESPACE_SDK


class DecodeError(BlobError):
    """Encoded message bytes could not be decoded."""

    default_code = "decode_error"
    default_abci_code = 11193


# ------------------------------- algorithms ---------------------------------


class InvalidSize(BlobError):
    default_code = "invalid_size"
    default_abci_code = 11190


class InvalidWidth(BlobError):
    default_code = "invalid_width"
    default_abci_code = 11191


class EmptyInput(BlobError):
    """Merkle root requested over zero leaves."""

    default_code = "empty_input"
    default_abci_code = 11192
    default_status = 500


# ------------------------------- configuration ------------------------------


class ConfigError(ValueError):
    """Raised when environment configuration is invalid."""


__all__ = [
    "CODESPACE_BLOB",
    "CODESPACE_SDK",
    "BlobError",
    "ReservedNamespace",
    "InvalidNamespace",
    "InvalidNamespaceVersion",
    "UnsupportedNamespaceVersion",
    "EmptyBlob",
    "UnsupportedShareVersion",
    "NoBlobs",
    "InvalidShareCommitment",
    "NoNamespaces",
    "NoShareVersions",
    "NoBlobSizes",
    "NoShareCommitments",
    "MismatchedArrayLengths",
    "InvalidAddress",
    "DecodeError",
    "InvalidSize",
    "InvalidWidth",
    "EmptyInput",
    "ConfigError",
]
