"""Tests for BlockLexer line classification."""

from __future__ import annotations

import sys
from decimal import Decimal

import pytest

from vemi.lexer import BlockLexer
from vemi.location import SourcePosition
from vemi.tokens import (
    BlankLineToken,
    BlockquoteToken,
    CodeBlockContentToken,
    CodeBlockEndToken,
    CodeBlockStartToken,
    HeadingToken,
    ListItemToken,
    OrderedListItemToken,
    TextLineToken,
    TokenType,
)


def lex(source: str) -> list:
    return BlockLexer(source).tokenize()


def types(source: str) -> list[str]:
    return [str(t.type) for t in lex(source)]


class TestBasics:
    def test_empty_input(self) -> None:
        assert lex("") == []

    def test_plain_line(self) -> None:
        assert lex("hello world") == [
            TextLineToken(position=SourcePosition(1, 1), content="hello world")
        ]

    def test_single_newline_is_one_blank_line(self) -> None:
        tokens = lex("\n")
        assert len(tokens) == 1
        assert isinstance(tokens[0], BlankLineToken)

    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t  "])
    def test_whitespace_only_lines_are_blank(self, line: str) -> None:
        assert types(line + "\nx") == ["blankLine", "textLine"]

    def test_trailing_newline_adds_no_token(self) -> None:
        assert types("a\n") == ["textLine"]

    def test_multiple_lines_in_order(self) -> None:
        source = "# Title\n\n- one\n1. two\n> quote\ntext"
        assert types(source) == [
            "heading",
            "blankLine",
            "listItem",
            "orderedListItem",
            "blockquote",
            "textLine",
        ]

    def test_line_feed_not_in_content(self) -> None:
        tokens = lex("first\nsecond\n")
        assert [t.content for t in tokens] == ["first", "second"]


class TestHeadings:
    def test_level_one(self) -> None:
        assert lex("# h1") == [HeadingToken(position=SourcePosition(1, 1), level=1, content="h1")]

    @pytest.mark.parametrize("level", range(1, 7))
    def test_levels_one_to_six(self, level: int) -> None:
        (token,) = lex("#" * level + " Title")
        assert isinstance(token, HeadingToken)
        assert token.level == level
        assert token.content == "Title"

    def test_seven_hashes_is_text(self) -> None:
        assert lex("####### x") == [
            TextLineToken(position=SourcePosition(1, 1), content="####### x")
        ]

    def test_whitespace_required(self) -> None:
        assert types("#hashtag") == ["textLine"]

    def test_bare_hash_is_text(self) -> None:
        assert types("#") == ["textLine"]

    def test_whitespace_run_is_dropped(self) -> None:
        (token,) = lex("##  \t spaced")
        assert token.content == "spaced"

    def test_trailing_hashes_kept(self) -> None:
        (token,) = lex("## Title ##")
        assert token.content == "Title ##"

    def test_hash_then_only_spaces_is_empty_heading(self) -> None:
        (token,) = lex("#   ")
        assert isinstance(token, HeadingToken)
        assert token.content == ""

    def test_indented_hash_is_text(self) -> None:
        assert types("  # not a heading") == ["textLine"]


class TestOrderedList:
    def test_first(self) -> None:
        assert lex("1. first") == [
            OrderedListItemToken(position=SourcePosition(1, 1), number=1, content="first")
        ]

    def test_multi_digit_number(self) -> None:
        (token,) = lex("42. answer")
        assert token.number == 42

    def test_leading_zeros_parsed_as_integer(self) -> None:
        (token,) = lex("007. bond")
        assert token.number == 7
        assert token.content == "bond"

    def test_paren_marker_is_text(self) -> None:
        assert types("1) first") == ["textLine"]

    def test_whitespace_required(self) -> None:
        assert types("1.first") == ["textLine"]

    def test_digits_without_dot_are_text(self) -> None:
        assert types("2024 was a year") == ["textLine"]

    def test_unicode_digits_are_text(self) -> None:
        assert types("١. arabic-indic") == ["textLine"]

    def test_number_longer_than_int_digit_limit(self) -> None:
        digits = "1" * (sys.get_int_max_str_digits() + 700)
        (token,) = lex(f"{digits}. item")
        assert isinstance(token, OrderedListItemToken)
        assert token.number == int(Decimal(digits))
        assert token.content == "item"


class TestUnorderedList:
    @pytest.mark.parametrize("marker", ["-", "*", "+"])
    def test_markers(self, marker: str) -> None:
        assert lex(f"{marker} item") == [
            ListItemToken(position=SourcePosition(1, 1), marker=marker, content="item")
        ]

    def test_whitespace_required(self) -> None:
        assert types("-item") == ["textLine"]

    def test_double_marker_is_text(self) -> None:
        assert types("** bold") == ["textLine"]

    def test_thematic_break_is_text(self) -> None:
        assert types("---") == ["textLine"]

    def test_tab_separator(self) -> None:
        (token,) = lex("-\titem")
        assert token.content == "item"


class TestBlockquote:
    def test_with_space(self) -> None:
        assert lex("> quoted") == [
            BlockquoteToken(position=SourcePosition(1, 1), content="quoted")
        ]

    def test_without_space(self) -> None:
        (token,) = lex(">quoted")
        assert token.content == "quoted"

    def test_only_one_space_consumed(self) -> None:
        (token,) = lex(">   indented")
        assert token.content == "  indented"

    def test_tab_after_marker_kept(self) -> None:
        (token,) = lex(">\tquoted")
        assert token.content == "\tquoted"

    def test_bare_marker_has_empty_content(self) -> None:
        (token,) = lex(">")
        assert isinstance(token, BlockquoteToken)
        assert token.content == ""

    def test_nested_marker_kept_in_content(self) -> None:
        (token,) = lex("> > nested")
        assert token.content == "> nested"


class TestFencedCode:
    def test_backtick_fence_with_language(self) -> None:
        assert lex("```ts\nconst x = 1\n```") == [
            CodeBlockStartToken(position=SourcePosition(1, 1), fence="```", language="ts"),
            CodeBlockContentToken(
                position=SourcePosition(2, 1), content="const x = 1", line_in_block=1
            ),
            CodeBlockEndToken(position=SourcePosition(3, 1), fence="```"),
        ]

    def test_tilde_fence(self) -> None:
        tokens = lex("~~~\ncode\n~~~")
        assert tokens[0] == CodeBlockStartToken(
            position=SourcePosition(1, 1), fence="~~~", language=None
        )
        assert tokens[-1] == CodeBlockEndToken(position=SourcePosition(3, 1), fence="~~~")

    def test_language_is_first_word_of_info(self) -> None:
        (start, *_) = lex("```  python  title=demo\n```")
        assert start.language == "python"

    def test_no_language(self) -> None:
        (start, *_) = lex("```   \n```")
        assert start.language is None

    def test_tilde_does_not_close_backtick_fence(self) -> None:
        tokens = lex("```\n~~~\n```")
        assert [str(t.type) for t in tokens] == [
            "codeBlockStart",
            "codeBlockContent",
            "codeBlockEnd",
        ]
        assert tokens[1].content == "~~~"

    def test_backtick_does_not_close_tilde_fence(self) -> None:
        tokens = lex("~~~\n```\n~~~")
        assert tokens[1] == CodeBlockContentToken(
            position=SourcePosition(2, 1), content="```", line_in_block=1
        )

    def test_line_in_block_increments(self) -> None:
        tokens = lex("```\na\nb\nc\n```")
        content = [t for t in tokens if t.type == TokenType.CODE_BLOCK_CONTENT]
        assert [t.line_in_block for t in content] == [1, 2, 3]

    def test_line_in_block_restarts_per_block(self) -> None:
        tokens = lex("```\na\nb\n```\n~~~\nc\n~~~")
        content = [t for t in tokens if t.type == TokenType.CODE_BLOCK_CONTENT]
        assert [t.line_in_block for t in content] == [1, 2, 1]

    def test_content_lines_are_raw(self) -> None:
        """Block syntax inside a fence is not classified."""
        tokens = lex("```\n# not heading\n\n- not list\n  indented\n```")
        content = [t.content for t in tokens if t.type == TokenType.CODE_BLOCK_CONTENT]
        assert content == ["# not heading", "", "- not list", "  indented"]

    def test_closing_line_may_carry_trailing_text(self) -> None:
        assert types("```\nx\n``` trailing") == [
            "codeBlockStart",
            "codeBlockContent",
            "codeBlockEnd",
        ]

    def test_longer_fence_opens_with_three_characters(self) -> None:
        (start, *_) = lex("````\n```")
        assert start.fence == "```"
        assert start.language == "`"

    def test_indented_fence_is_text(self) -> None:
        assert types(" ```") == ["textLine"]

    def test_fence_precedes_heading_and_lists(self) -> None:
        assert types("```\n```\n# h") == ["codeBlockStart", "codeBlockEnd", "heading"]

    def test_empty_block(self) -> None:
        assert types("```\n```") == ["codeBlockStart", "codeBlockEnd"]


class TestPrecedence:
    def test_blank_before_everything(self) -> None:
        assert types("   ") == ["blankLine"]

    def test_ordered_before_unordered(self) -> None:
        assert types("1. - x") == ["orderedListItem"]

    def test_heading_content_not_reclassified(self) -> None:
        (token,) = lex("# - item")
        assert isinstance(token, HeadingToken)
        assert token.content == "- item"

    def test_list_before_blockquote(self) -> None:
        (token,) = lex("- > quoted")
        assert isinstance(token, ListItemToken)
        assert token.content == "> quoted"
