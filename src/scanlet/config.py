"""ContextVar-based scan configuration for Scanlet.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer built without an explicit config reads the context's config each
time it scans; a TokenRegistryBuilder reads it once, when it creates its
default pattern engine.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Explicit config
    lexer = Lexer(registry, config=ScanConfig(source_file="demo.src"))

    # Or use the context manager
    with scan_config_context(ScanConfig(source_file="demo.src")):
        tokens = list(lexer.tokenize(source))

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        source_file: Path stamped on every Location (for diagnostics)
        pattern_flags: ``re`` flags for the default RegexEngine

    """

    source_file: str | None = None
    pattern_flags: int = 0

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "source_file": "demo.src",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.source_file
            'demo.src'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.
    """
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(source_file="a.src")):
        ...     get_scan_config().source_file
        'a.src'

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
