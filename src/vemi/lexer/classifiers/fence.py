"""Fenced code block classifier mixin."""

from vemi.lexer.charsets import FENCE_CHARS, FENCES
from vemi.lexer.modes import LexerMode
from vemi.location import SourcePosition
from vemi.tokens import CodeBlockStartToken


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    __slots__ = ()

    # These will be set by the BlockLexer class
    _mode: LexerMode
    _current_fence: str
    _code_block_line: int

    def _try_classify_fence_start(
        self, line: str, position: SourcePosition
    ) -> CodeBlockStartToken | None:
        """Try to classify line as the opening fence of a code block.

        The fence is exactly the three-character prefix (``` or ~~~);
        anything after it, trimmed, is the info string whose first word
        becomes the language. Longer runs such as ```` still open with
        the three-character fence.

        On success the lexer switches to CODE_FENCE mode.

        Args:
            line: Full line without its line feed
            position: Where the line starts

        Returns:
            Token if the line opens a fence, None otherwise.
        """
        if not line or line[0] not in FENCE_CHARS:
            return None

        fence = next((f for f in FENCES if line.startswith(f)), None)
        if fence is None:
            return None

        info = line[len(fence) :].strip()
        language = info.split()[0] if info else None

        self._mode = LexerMode.CODE_FENCE
        self._current_fence = fence
        self._code_block_line = 0

        return CodeBlockStartToken(position=position, fence=fence, language=language)

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line closes the current code block.

        Only the identical fence literal closes a block: ~~~ never closes
        a block opened with ```, and vice versa. Anything may follow the
        fence on the closing line.
        """
        if not self._current_fence:
            return False
        return line.startswith(self._current_fence)
