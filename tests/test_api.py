"""Tests for the public vemi API."""

import vemi
from vemi import (
    BLOCK_TOKEN_TYPES,
    INLINE_TOKEN_TYPES,
    BlockLexer,
    HeadingToken,
    InlineLexer,
    ListItemToken,
    SourcePosition,
    TextToken,
    TokenType,
    tokenize_blocks,
    tokenize_inline,
)


class TestTokenizeBlocks:
    def test_empty(self) -> None:
        assert tokenize_blocks("") == []

    def test_matches_lexer(self) -> None:
        source = "# T\n\n- a\n```\nx\n```"
        assert tokenize_blocks(source) == BlockLexer(source).tokenize()

    def test_document(self) -> None:
        source = "# Title\n- item\n"
        assert tokenize_blocks(source) == [
            HeadingToken(position=SourcePosition(1, 1), level=1, content="Title"),
            ListItemToken(position=SourcePosition(2, 1), marker="-", content="item"),
        ]


class TestTokenizeInline:
    def test_empty(self) -> None:
        assert tokenize_inline("") == []

    def test_matches_lexer(self) -> None:
        source = "**a** [b](c) `d`"
        assert tokenize_inline(source) == InlineLexer(source).tokenize()

    def test_block_content_feeds_inline_lexer(self) -> None:
        """Block token content is ordinary inline input for the parser."""
        (heading,) = tokenize_blocks("## Use *this*")
        tokens = tokenize_inline(heading.content)
        assert [str(t.type) for t in tokens] == ["text", "emphasisStart", "text", "emphasisEnd"]
        assert tokens[0] == TextToken(position=SourcePosition(1, 1), content="Use ")


class TestTokenVocabulary:
    def test_nine_block_types(self) -> None:
        assert len(BLOCK_TOKEN_TYPES) == 9

    def test_eleven_inline_types(self) -> None:
        assert len(INLINE_TOKEN_TYPES) == 11

    def test_sets_are_disjoint(self) -> None:
        assert not BLOCK_TOKEN_TYPES & INLINE_TOKEN_TYPES
        assert BLOCK_TOKEN_TYPES | INLINE_TOKEN_TYPES == set(TokenType)

    def test_type_tags_are_strings(self) -> None:
        token = HeadingToken(position=SourcePosition(1, 1), level=2, content="x")
        assert token.type == "heading"

    def test_tokens_are_frozen(self) -> None:
        token = TextToken(position=SourcePosition(1, 1), content="x")
        try:
            token.content = "y"  # type: ignore[misc]
        except AttributeError:
            pass
        else:
            raise AssertionError("token should be immutable")

    def test_pattern_matching(self) -> None:
        match tokenize_blocks("### Deep")[0]:
            case HeadingToken(level=level, content=content):
                assert (level, content) == (3, "Deep")
            case _:
                raise AssertionError("expected a heading")


def test_all_exports_resolve() -> None:
    for name in vemi.__all__:
        assert hasattr(vemi, name), name
