"""Lexer configuration held in a ContextVar.

Each thread (and each asyncio task) sees its own active config, so
concurrent callers can tokenize with different settings without locks.
A lexer snapshots the active config in its constructor; changing the
config afterwards does not affect a lexer that already exists.

Usage:
    from vemi.config import LexerConfig, lexer_config_context
    from vemi.lexer import BlockLexer

    with lexer_config_context(LexerConfig(normalize_newlines=True)):
        tokens = BlockLexer("line one\\r\\nline two").tokenize()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Settings shared by the block and inline lexers.

    Attributes:
        normalize_newlines: Rewrite ``\\r\\n`` and lone ``\\r`` as ``\\n``
            before scanning. Off by default so token contents always
            reconstruct the raw input.

    """

    normalize_newlines: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "LexerConfig":
        """Build a config from a mapping, e.g. a loaded settings file.

        Keys that are not LexerConfig fields are dropped.

        Example:
            >>> LexerConfig.from_dict({"normalize_newlines": True, "other": 1})
            LexerConfig(normalize_newlines=True)

        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})


_DEFAULT_CONFIG = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar("vemi_lexer_config", default=_DEFAULT_CONFIG)


def get_lexer_config() -> LexerConfig:
    """Return the config active in the current context."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Make ``config`` active for the rest of the current context."""
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Activate ``config`` for the body of a ``with`` block.

    The previous config comes back on exit, including exit by exception.
    """
    token = _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.reset(token)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
]
