"""ContextVar-based builder configuration for formattable.

Provides context-local configuration using Python's ContextVars (PEP 567).
A builder reads the active config once, when it is constructed.

Usage:
    from formattable.config import BuilderConfig, builder_config_context

    with builder_config_context(BuilderConfig(line_terminator="\\r\\n")):
        builder = FormattableStringBuilder()
    builder.append_line()  # writes "\\r\\n"

    # Or pass the terminator explicitly
    builder = FormattableStringBuilder(line_terminator="\\n")

"""

import os
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable builder configuration.

    Attributes:
        line_terminator: Sequence written by ``append_line()``. Written raw,
            never brace-escaped.

    """

    line_terminator: str = os.linesep

    def __post_init__(self) -> None:
        if not isinstance(self.line_terminator, str):
            raise TypeError(
                f"line_terminator must be str, got {type(self.line_terminator).__name__}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuilderConfig":
        """Create BuilderConfig from dictionary.

        Only includes keys that are valid BuilderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = BuilderConfig.from_dict({
            ...     "line_terminator": "\\r\\n",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.line_terminator
            '\\r\\n'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuilderConfig = BuilderConfig()

_builder_config: ContextVar[BuilderConfig] = ContextVar(
    "builder_config",
    default=_DEFAULT_CONFIG,
)


def get_builder_config() -> BuilderConfig:
    """Get current builder configuration (context-local)."""
    return _builder_config.get()


def set_builder_config(config: BuilderConfig) -> None:
    """Set builder configuration for current context.

    Args:
        config: BuilderConfig instance to use for this context.

    """
    _builder_config.set(config)


def reset_builder_config() -> None:
    """Reset to default configuration."""
    _builder_config.set(_DEFAULT_CONFIG)


@contextmanager
def builder_config_context(config: BuilderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: BuilderConfig to use within the context.

    Example:
        >>> with builder_config_context(BuilderConfig(line_terminator="\\n")):
        ...     builder = FormattableStringBuilder()
        >>> # Previous config restored here

    """
    previous = _builder_config.get()
    _builder_config.set(config)
    try:
        yield
    finally:
        _builder_config.set(previous)


__all__ = [
    "BuilderConfig",
    "builder_config_context",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
