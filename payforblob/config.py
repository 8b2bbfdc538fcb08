"""
payforblob configuration.

This module defines the runtime configuration surface:
- Square bounds used to pick the subtree width of a commitment
- Signer address prefix
- Worker pool size for batch commitments
- Log level and format

Consensus constants (share size, namespace layout) are *not* here; see
`payforblob.constants`.

Environment variables (all optional):

  # Squares & commitments
  PAYFORBLOB_MAX_SQUARE_SIZE=128          # power of two, <= 128
  PAYFORBLOB_SUBTREE_ROOT_THRESHOLD=64

  # Addresses
  PAYFORBLOB_ADDRESS_HRP=celestia

  # Batch commitments
  PAYFORBLOB_COMMIT_WORKERS=4             # 1 = sequential

  # Logging
  PAYFORBLOB_LOG_LEVEL=INFO
  PAYFORBLOB_LOG_FORMAT=text              # or json
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from functools import lru_cache
from typing import Dict, List

from .constants import (
    DEFAULT_MAX_SQUARE_SIZE,
    DEFAULT_SUBTREE_ROOT_THRESHOLD,
    SQUARE_SIZE_UPPER_BOUND,
)
from .errors import ConfigError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_FORMATS = ("text", "json")


# ------------------------------- helpers ------------------------------------


def _getenv(key: str, default: str | None = None) -> str | None:
    v = os.environ.get(key)
    return v if v is not None and v.strip() != "" else default


def _getenv_int(key: str, default: int) -> int:
    v = _getenv(key)
    if v is None:
        return default
    base = 10
    vv = v.strip().lower()
    if vv.startswith("0x"):
        base = 16
    try:
        return int(vv, base)
    except ValueError as e:
        raise ConfigError(f"Invalid int for {key}: {v!r}") from e


# ------------------------------- config -------------------------------------


@dataclass(frozen=True)
class SquareConfig:
    """
    Bounds used when deriving the maximum subtree width of a commitment.

    - max_square_size: upper bound on the data square side (power of two)
    - subtree_root_threshold: number of subtree roots a commitment may hold
      before its subtrees are widened
    """
    max_square_size: int = DEFAULT_MAX_SQUARE_SIZE
    subtree_root_threshold: int = DEFAULT_SUBTREE_ROOT_THRESHOLD

    def validate(self) -> None:
        m = self.max_square_size
        if m <= 0 or m & (m - 1) != 0:
            raise ConfigError("max_square_size must be a positive power of two")
        if m > SQUARE_SIZE_UPPER_BOUND:
            raise ConfigError(f"max_square_size must be <= {SQUARE_SIZE_UPPER_BOUND}")
        if self.subtree_root_threshold <= 0:
            raise ConfigError("subtree_root_threshold must be > 0")


@dataclass(frozen=True)
class AddressConfig:
    """Human-readable prefix expected on bech32 signer addresses."""
    hrp: str = "celestia"

    def validate(self) -> None:
        if not self.hrp or any(ord(c) < 33 or ord(c) > 126 for c in self.hrp):
            raise ConfigError("hrp must be non-empty printable ASCII")
        if self.hrp != self.hrp.lower():
            raise ConfigError("hrp must be lowercase")


@dataclass(frozen=True)
class BatchConfig:
    """Worker pool used by create_commitments (1 runs sequentially)."""
    workers: int = 4

    def validate(self) -> None:
        if not (1 <= self.workers <= 256):
            raise ConfigError("workers must be in 1..256")


@dataclass(frozen=True)
class LogConfig:
    level: str = "INFO"
    fmt: str = "text"

    def validate(self) -> None:
        if self.level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"log level must be one of {_LOG_LEVELS}")
        if self.fmt.lower() not in _LOG_FORMATS:
            raise ConfigError(f"log format must be one of {_LOG_FORMATS}")


@dataclass(frozen=True)
class PayForBlobConfig:
    """
    Top-level configuration.
    """
    square: SquareConfig = field(default_factory=SquareConfig)
    address: AddressConfig = field(default_factory=AddressConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def validate(self) -> None:
        self.square.validate()
        self.address.validate()
        self.batch.validate()
        self.log.validate()

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


# ------------------------------- loader -------------------------------------


def _load_from_env() -> PayForBlobConfig:
    square_cfg = SquareConfig(
        max_square_size=_getenv_int("PAYFORBLOB_MAX_SQUARE_SIZE", DEFAULT_MAX_SQUARE_SIZE),
        subtree_root_threshold=_getenv_int(
            "PAYFORBLOB_SUBTREE_ROOT_THRESHOLD", DEFAULT_SUBTREE_ROOT_THRESHOLD
        ),
    )
    address_cfg = AddressConfig(hrp=_getenv("PAYFORBLOB_ADDRESS_HRP", "celestia") or "celestia")
    batch_cfg = BatchConfig(workers=_getenv_int("PAYFORBLOB_COMMIT_WORKERS", 4))
    log_cfg = LogConfig(
        level=(_getenv("PAYFORBLOB_LOG_LEVEL", "INFO") or "INFO").upper(),
        fmt=(_getenv("PAYFORBLOB_LOG_FORMAT", "text") or "text").lower(),
    )

    cfg = PayForBlobConfig(
        square=square_cfg,
        address=address_cfg,
        batch=batch_cfg,
        log=log_cfg,
    )
    cfg.validate()
    return cfg


@lru_cache(maxsize=1)
def get_config() -> PayForBlobConfig:
    """
    Load and validate configuration (cached). Clear the cache in tests
    via `get_config.cache_clear()` to observe env changes.
    """
    return _load_from_env()


CONFIG: PayForBlobConfig = get_config()


def format_config(cfg: PayForBlobConfig | None = None) -> str:
    cfg = cfg or get_config()
    lines: List[str] = []
    for section, values in cfg.to_dict().items():
        for k, v in values.items():  # type: ignore[union-attr]
            lines.append(f"{section}.{k}: {v}")
    return "\n".join(lines)


__all__ = [
    "SquareConfig",
    "AddressConfig",
    "BatchConfig",
    "LogConfig",
    "PayForBlobConfig",
    "get_config",
    "CONFIG",
    "format_config",
]
