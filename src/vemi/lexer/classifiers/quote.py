"""Block quote classifier mixin."""

from vemi.location import SourcePosition
from vemi.tokens import BlockquoteToken


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    __slots__ = ()

    def _try_classify_blockquote(
        self, line: str, position: SourcePosition
    ) -> BlockquoteToken | None:
        """Try to classify line as a block quote.

        The > marker and at most one following space are dropped; the rest
        of the line, including any further spaces, is the content.
        """
        if not line.startswith(">"):
            return None

        content = line[2:] if line[1:2] == " " else line[1:]
        return BlockquoteToken(position=position, content=content)
