"""Block mode scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vemi.location import SourcePosition
from vemi.tokens import BlankLineToken, BlockToken, TextLineToken


class BlockScannerMixin:
    """Mixin providing block mode scanning logic.

    Classifies one complete line outside a fenced code block. Classifiers
    are tried in a fixed order and the first match wins:

    1. Blank line
    2. Fence start
    3. Heading
    4. Ordered list item
    5. Unordered list item
    6. Block quote
    7. Text line (always matches)

    """

    __slots__ = ()

    if TYPE_CHECKING:

        def _emit(self, token: BlockToken) -> None: ...

    def _scan_block_line(self, line: str, position: SourcePosition) -> None:
        """Classify a line in BLOCK mode and emit exactly one token."""
        if not line.strip():
            self._emit(BlankLineToken(position=position))
            return

        # Classifier methods are provided by classifier mixins when composed
        token: BlockToken | None = (
            self._try_classify_fence_start(line, position)  # type: ignore[attr-defined]
            or self._try_classify_heading(line, position)  # type: ignore[attr-defined]
            or self._try_classify_ordered_item(line, position)  # type: ignore[attr-defined]
            or self._try_classify_list_item(line, position)  # type: ignore[attr-defined]
            or self._try_classify_blockquote(line, position)  # type: ignore[attr-defined]
        )
        if token is None:
            token = TextLineToken(position=position, content=line)
        self._emit(token)
