"""Library-wide configuration.

Holds the limits and defaults shared by the prime utilities. A single
module-level default is created lazily; hosts replace it with
``set_config`` before running queries.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class ComputilConfig:
    """Configuration for computil operations.

    Attributes:
        max_sieve_limit: Largest upper bound accepted by range sieving.
            The sieve allocates one byte per integer up to the bound.
        random_seed: Seed used by ``random_prime`` when no generator is
            supplied. ``None`` seeds from system entropy.
    """

    max_sieve_limit: int = 10_000_000
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.max_sieve_limit < 2:
            raise ValueError(f"max_sieve_limit must be >= 2, got {self.max_sieve_limit}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'ComputilConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


_default_config: Optional[ComputilConfig] = None


def get_config() -> ComputilConfig:
    """Get the active configuration."""
    global _default_config
    if _default_config is None:
        _default_config = ComputilConfig()
    return _default_config


def set_config(config: ComputilConfig) -> None:
    """Replace the active configuration."""
    global _default_config
    _default_config = config


def reset_config() -> None:
    """Restore the default configuration."""
    global _default_config
    _default_config = None
