"""ContextVar-based configuration for tailprog.

Configuration covers the tooling around the unparser: tree serialization and
the command line. The unparser itself has no options; its output format is
fixed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from tailprog.config import TailprogConfig, config_context
    from tailprog.serialization import from_json

    with config_context(TailprogConfig(max_depth=50)):
        tree = from_json(text)

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TailprogConfig:
    """Immutable tooling configuration.

    Attributes:
        json_indent: Indentation for to_json() when the caller passes none
        max_depth: Deepest nesting from_dict() accepts before giving up
        log_level: Level name the command line configures logging with

    """

    json_indent: int | None = None
    max_depth: int = 200
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "TailprogConfig":
        """Create TailprogConfig from a mapping.

        Only includes keys that are valid TailprogConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = TailprogConfig.from_dict({"max_depth": 10, "colour": "red"})
            >>> config.max_depth
            10

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TailprogConfig = TailprogConfig()

_config: ContextVar[TailprogConfig] = ContextVar(
    "tailprog_config",
    default=_DEFAULT_CONFIG,
)


def get_config() -> TailprogConfig:
    """Get the active configuration for this context."""
    return _config.get()


def set_config(config: TailprogConfig) -> Token[TailprogConfig]:
    """Set configuration for the current context.

    Returns:
        Token that restores the previous value when passed to reset_config().

    """
    return _config.set(config)


def reset_config(token: Token[TailprogConfig] | None = None) -> None:
    """Restore configuration.

    With a token, restores the value that was active before the matching
    set_config() call. Without one, reverts to the defaults.

    """
    if token is not None:
        _config.reset(token)
    else:
        _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: TailprogConfig) -> Iterator[TailprogConfig]:
    """Temporarily activate a configuration.

    Example:
        >>> with config_context(TailprogConfig(json_indent=2)):
        ...     get_config().json_indent
        2

    """
    token = set_config(config)
    try:
        yield config
    finally:
        reset_config(token)
