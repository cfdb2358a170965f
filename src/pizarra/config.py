"""ContextVar-based sanitization configuration for Pizarra.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Every pipeline function reads the active config when it runs, so callers can
tune behavior for one request without threading arguments through.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pizarra.config import SanitizeConfig, sanitize_config_context

    with sanitize_config_context(SanitizeConfig(wrap_subscripts=False)):
        text = sanitize_flashcard_content(raw)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class SanitizeConfig:
    """Immutable sanitization configuration.

    Attributes:
        max_escape_passes: Upper bound on escape-decoding passes
        strip_metadata: Remove a leading ```json metadata block from lessons
        wrap_subscripts: Wrap bare ``x_1`` tokens in flashcards as inline math
        debug: Emit debug log records from the metadata extractor

    """

    max_escape_passes: int = 5
    strip_metadata: bool = True
    wrap_subscripts: bool = True
    debug: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "SanitizeConfig":
        """Create SanitizeConfig from dictionary.

        Only includes keys that are valid SanitizeConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = SanitizeConfig.from_dict({
            ...     "wrap_subscripts": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.wrap_subscripts
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: SanitizeConfig = SanitizeConfig()

_sanitize_config: ContextVar[SanitizeConfig] = ContextVar(
    "sanitize_config",
    default=_DEFAULT_CONFIG,
)


def get_sanitize_config() -> SanitizeConfig:
    """Get current sanitization configuration (thread-local)."""
    return _sanitize_config.get()


def set_sanitize_config(config: SanitizeConfig) -> None:
    """Set sanitization configuration for current context.

    Args:
        config: SanitizeConfig instance to use for this context.

    """
    _sanitize_config.set(config)


def reset_sanitize_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _sanitize_config.set(_DEFAULT_CONFIG)


@contextmanager
def sanitize_config_context(config: SanitizeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with sanitize_config_context(SanitizeConfig(wrap_subscripts=False)):
        ...     get_sanitize_config().wrap_subscripts
        False
        >>> get_sanitize_config().wrap_subscripts
        True

    """
    previous = _sanitize_config.get()
    _sanitize_config.set(config)
    try:
        yield
    finally:
        _sanitize_config.set(previous)


__all__ = [
    "SanitizeConfig",
    "get_sanitize_config",
    "set_sanitize_config",
    "reset_sanitize_config",
    "sanitize_config_context",
]
