"""Fenced code mode scanner mixin."""

from typing import TYPE_CHECKING

from vemi.lexer.modes import LexerMode
from vemi.location import SourcePosition
from vemi.tokens import BlockToken, CodeBlockContentToken, CodeBlockEndToken


class FenceScannerMixin:
    """Mixin providing fenced code mode scanning logic.

    Scans lines inside fenced code blocks, detecting the closing fence.

    """

    __slots__ = ()

    # These will be set by the BlockLexer class
    _mode: LexerMode
    _current_fence: str
    _code_block_line: int

    if TYPE_CHECKING:

        def _emit(self, token: BlockToken) -> None: ...

    def _scan_code_fence_line(self, line: str, position: SourcePosition) -> None:
        """Emit CODE_BLOCK_END for the closing fence, else one content line."""
        if self._is_closing_fence(line):  # type: ignore[attr-defined]
            fence = self._current_fence
            # Reset fence state
            self._mode = LexerMode.BLOCK
            self._current_fence = ""
            self._code_block_line = 0
            self._emit(CodeBlockEndToken(position=position, fence=fence))
            return

        self._code_block_line += 1
        self._emit(
            CodeBlockContentToken(
                position=position,
                content=line,
                line_in_block=self._code_block_line,
            )
        )
