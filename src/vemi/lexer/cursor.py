"""Shared character cursor for the vemi lexers.

Owns the source text and the scanning position (line, column, offset),
exposes lookahead and consumption primitives, and drives the tokenize
loop by calling the concrete lexer's ``_scan_token`` step until the
source is exhausted.

Out-of-range reads return END (the empty string) rather than raising,
so concrete lexers never need bounds checks.

Thread Safety:
Cursor instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from vemi.config import get_lexer_config
from vemi.errors import LexerReuseError
from vemi.location import SourcePosition
from vemi.utils.logger import get_logger

logger = get_logger(__name__)

# Returned by out-of-range reads; never equal to a real character
END = ""


class Cursor[T]:
    """Position-tracking scanner with a pluggable recognition step.

    Subclasses implement ``_scan_token``, which must consume at least one
    character per call. ``tokenize`` calls it until the end of input and
    returns every token passed to ``_emit``.

    Usage:
            >>> class CharLexer(Cursor[str]):
            ...     def _scan_token(self) -> None:
            ...         self._emit(self._advance())
            >>> CharLexer("ab").tokenize()
            ['a', 'b']

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_line",
        "_col",
        "_tokens",
        "_tokenized",
    )

    def __init__(self, source: str) -> None:
        """Initialize cursor at the start of source.

        Args:
            source: Text to scan. Newlines are normalized first when the
                active LexerConfig asks for it.
        """
        if get_lexer_config().normalize_newlines:
            source = source.replace("\r\n", "\n").replace("\r", "\n")
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[T] = []
        self._tokenized = False

    def tokenize(self) -> list[T]:
        """Scan the whole source and return the tokens in order.

        Returns:
            List of emitted tokens. Empty for empty source.

        Raises:
            LexerReuseError: If called more than once on the same instance.
        """
        if self._tokenized:
            raise LexerReuseError(type(self).__name__)
        self._tokenized = True

        while not self._is_at_end():
            start = self._pos
            self._scan_token()
            if self._pos == start:
                # A step that consumes nothing would loop forever
                logger.warning(
                    "%s made no progress at %s; stopping",
                    type(self).__name__,
                    self._position(),
                )
                break

        self._finish()
        logger.debug(
            "%s produced %d tokens from %d characters",
            type(self).__name__,
            len(self._tokens),
            self._source_len,
        )
        return self._tokens

    def _scan_token(self) -> None:
        """Recognize one unit of input. Implemented by subclasses."""
        raise NotImplementedError

    def _finish(self) -> None:
        """Called once after the last step. Override to inspect final state."""

    # =========================================================================
    # Character navigation
    # =========================================================================

    def _is_at_end(self) -> bool:
        return self._pos >= self._source_len

    def _peek(self, offset: int = 0) -> str:
        """Peek at a character without advancing.

        Args:
            offset: Distance ahead of the current position.

        Returns:
            The character, or END outside the source.
        """
        index = self._pos + offset
        if index < 0 or index >= self._source_len:
            return END
        return self._source[index]

    def _advance(self) -> str:
        """Consume one character, updating line/column tracking.

        Returns:
            The consumed character, or END (without moving) at end of input.
        """
        if self._pos >= self._source_len:
            return END

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals expected."""
        if self._is_at_end() or self._source[self._pos] != expected:
            return False
        self._advance()
        return True

    def _match_string(self, expected: str) -> bool:
        """Consume expected only if the whole string is next in the source.

        Checks every character by lookahead before consuming any, so a
        partial match leaves the position untouched.
        """
        for i, char in enumerate(expected):
            if self._peek(i) != char:
                return False
        for _ in expected:
            self._advance()
        return True

    # =========================================================================
    # Position tracking
    # =========================================================================

    def _position(self) -> SourcePosition:
        """Current position as a SourcePosition."""
        return SourcePosition(line=self._line, column=self._col, offset=self._pos)

    def _emit(self, token: T) -> None:
        """Append a token. The only way tokens enter the sequence."""
        self._tokens.append(token)

    @property
    def source(self) -> str:
        """The (possibly newline-normalized) source being scanned."""
        return self._source

    @property
    def offset(self) -> int:
        """Absolute 0-indexed offset of the next unread character."""
        return self._pos

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._col
