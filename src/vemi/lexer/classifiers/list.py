"""List item classifier mixin."""

from __future__ import annotations

from decimal import Decimal

from vemi.lexer.charsets import DIGITS, UNORDERED_LIST_MARKERS
from vemi.location import SourcePosition
from vemi.tokens import ListItemToken, OrderedListItemToken


class ListClassifierMixin:
    """Mixin providing ordered and unordered list item classification."""

    __slots__ = ()

    def _skip_whitespace(self, line: str, pos: int) -> int:
        """Skip a whitespace run. Implemented by BlockLexer."""
        raise NotImplementedError

    def _try_classify_ordered_item(
        self, line: str, position: SourcePosition
    ) -> OrderedListItemToken | None:
        """Try to classify line as an ordered list item.

        Ordered items are one or more ASCII digits, a literal ".", at least
        one whitespace character, then content.
        """
        pos = 0
        line_len = len(line)
        while pos < line_len and line[pos] in DIGITS:
            pos += 1

        if pos == 0 or pos >= line_len or line[pos] != ".":
            return None

        content_start = self._skip_whitespace(line, pos + 1)
        if content_start == pos + 1:
            return None

        return OrderedListItemToken(
            position=position,
            number=int(Decimal(line[:pos])),  # not bound by the int(str) digit limit
            content=line[content_start:],
        )

    def _try_classify_list_item(
        self, line: str, position: SourcePosition
    ) -> ListItemToken | None:
        """Try to classify line as an unordered list item.

        Unordered items are a single -, * or + followed by at least one
        whitespace character, then content.
        """
        if not line or line[0] not in UNORDERED_LIST_MARKERS:
            return None

        content_start = self._skip_whitespace(line, 1)
        if content_start == 1:
            return None

        return ListItemToken(position=position, marker=line[0], content=line[content_start:])
