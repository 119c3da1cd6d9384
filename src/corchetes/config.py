"""ContextVar-based translation configuration for Corchetes.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per translate() call, read by the parser in that context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from corchetes.config import TranslateConfig, translate_config_context

    with translate_config_context(TranslateConfig(max_depth=16)):
        html = Parser(tokenize(source)).render()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from corchetes.errors import ConfigError

DEFAULT_MAX_DEPTH = 256
# One Python frame per nesting level, below the default recursion limit of 1000
MAX_DEPTH_LIMIT = 512


@dataclass(frozen=True, slots=True)
class TranslateConfig:
    """Immutable translation configuration.

    Attributes:
        max_depth: Maximum tag nesting depth. An opening tag that would nest
            deeper is emitted as literal text instead of being rendered.
            Must be between 1 and MAX_DEPTH_LIMIT.

    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ConfigError("max_depth", f"expected int, got {type(self.max_depth).__name__}")
        if self.max_depth < 1:
            raise ConfigError("max_depth", f"must be >= 1, got {self.max_depth}")
        if self.max_depth > MAX_DEPTH_LIMIT:
            raise ConfigError(
                "max_depth", f"must be <= {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TranslateConfig":
        """Create TranslateConfig from dictionary.

        Only includes keys that are valid TranslateConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> TranslateConfig.from_dict({"max_depth": 32, "theme": "dark"}).max_depth
            32

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TranslateConfig = TranslateConfig()

_translate_config: ContextVar[TranslateConfig] = ContextVar(
    "translate_config",
    default=_DEFAULT_CONFIG,
)


def get_translate_config() -> TranslateConfig:
    """Get current translation configuration (thread-local)."""
    return _translate_config.get()


def set_translate_config(config: TranslateConfig) -> None:
    """Set translation configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _translate_config.set(config)


def reset_translate_config() -> None:
    """Reset to default configuration."""
    _translate_config.set(_DEFAULT_CONFIG)


@contextmanager
def translate_config_context(config: TranslateConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with translate_config_context(TranslateConfig(max_depth=4)):
        ...     get_translate_config().max_depth
        4

    """
    previous = _translate_config.get()
    _translate_config.set(config)
    try:
        yield
    finally:
        _translate_config.set(previous)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
    "TranslateConfig",
    "get_translate_config",
    "set_translate_config",
    "reset_translate_config",
    "translate_config_context",
]
