"""ContextVar-based parse configuration for mdpreview.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse() call and read by the scanner and the inline
resolver in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and concurrent parses cannot see each other's config.

Usage:
    from mdpreview import parse, ParseConfig

    elements = parse(text, config=ParseConfig(spoiler_enabled=False))

    # Or scope a config around lower-level calls
    from mdpreview.config import parse_config_context
    from mdpreview.inline import resolve

    with parse_config_context(ParseConfig(underline_enabled=False)):
        spans = resolve("R&D budget & plans")

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        default_code_language: Language recorded for a code block whose
            opening fence has no info string
        strikethrough_enabled: Recognize ~~strikethrough~~ spans
        underline_enabled: Recognize &underline& spans
        spoiler_enabled: Recognize ||spoiler|| spans

    Bold and italic spans are always recognized.

    """

    default_code_language: str = "plaintext"
    strikethrough_enabled: bool = True
    underline_enabled: bool = True
    spoiler_enabled: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "underline_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.underline_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(spoiler_enabled=False)):
        ...     spans = resolve("||hidden||")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
