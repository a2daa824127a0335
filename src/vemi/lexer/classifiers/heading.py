"""Heading classifier mixin."""

from vemi.lexer.charsets import MAX_HEADING_LEVEL
from vemi.location import SourcePosition
from vemi.tokens import HeadingToken


class HeadingClassifierMixin:
    """Mixin providing heading classification."""

    __slots__ = ()

    def _skip_whitespace(self, line: str, pos: int) -> int:
        """Skip a whitespace run. Implemented by BlockLexer."""
        raise NotImplementedError

    def _try_classify_heading(self, line: str, position: SourcePosition) -> HeadingToken | None:
        """Try to classify line as a heading.

        Headings are 1-6 # characters followed by at least one whitespace
        character. Content is everything after the whitespace run; a run of
        seven or more # is never a heading.

        Args:
            line: Full line without its line feed
            position: Where the line starts

        Returns:
            Token if valid heading, None otherwise.
        """
        level = 0
        line_len = len(line)
        while level < line_len and line[level] == "#":
            level += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        content_start = self._skip_whitespace(line, level)
        if content_start == level:
            return None

        return HeadingToken(position=position, level=level, content=line[content_start:])
