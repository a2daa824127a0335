"""Line-oriented block lexer.

Reads the source one line at a time and classifies each line into
exactly one block token, or into a start/content/end run for fenced
code blocks.

Usage:
    >>> lexer = BlockLexer("# Hello\\n\\nWorld")
    >>> for token in lexer.tokenize():
    ...     print(token.type, token.position)
heading 1:1
blankLine 2:1
textLine 3:1

Thread Safety:
BlockLexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from vemi.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
)
from vemi.lexer.cursor import Cursor
from vemi.lexer.modes import LexerMode
from vemi.lexer.scanners import BlockScannerMixin, FenceScannerMixin
from vemi.tokens import BlockToken
from vemi.utils.logger import get_logger

logger = get_logger(__name__)


class BlockLexer(
    # Classifiers (pure logic apart from fence state)
    HeadingClassifierMixin,
    FenceClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    # Scanners (mode-specific scanning logic)
    BlockScannerMixin,
    FenceScannerMixin,
    Cursor[BlockToken],
):
    """Block lexer producing one token per source line.

    Each step reads a whole line (the line feed is consumed but never
    part of any content), then dispatches on the current mode:
    - CODE_FENCE: closing fence or raw content line
    - BLOCK: blank, fence start, heading, ordered item, unordered item,
      block quote, or plain text line, in that order

    """

    __slots__ = (
        "_mode",
        "_current_fence",  # Exact opening fence literal; "" outside a block
        "_code_block_line",  # Index of the last content line emitted
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Block-level source text
        """
        super().__init__(source)
        self._mode = LexerMode.BLOCK
        self._current_fence: str = ""
        self._code_block_line: int = 0

    @property
    def in_code_block(self) -> bool:
        """True while inside a fenced code block."""
        return self._mode == LexerMode.CODE_FENCE

    def _scan_token(self) -> None:
        position = self._position()
        line = self._read_line()

        if self._mode == LexerMode.CODE_FENCE:
            self._scan_code_fence_line(line, position)
        else:
            self._scan_block_line(line, position)

    def _finish(self) -> None:
        if self._mode == LexerMode.CODE_FENCE:
            logger.debug(
                "Code fence %r still open at end of input after %d lines",
                self._current_fence,
                self._code_block_line,
            )

    # =========================================================================
    # Line helpers
    # =========================================================================

    def _read_line(self) -> str:
        """Consume characters up to and including the next line feed.

        Returns:
            The line without its line feed.
        """
        chars: list[str] = []
        while not self._is_at_end():
            char = self._advance()
            if char == "\n":
                break
            chars.append(char)
        return "".join(chars)

    def _skip_whitespace(self, line: str, pos: int) -> int:
        """Return the index of the first non-whitespace character at or after pos."""
        line_len = len(line)
        while pos < line_len and line[pos].isspace():
            pos += 1
        return pos
