"""Tests for the lark-based SCSS block parser."""

import pytest

from scss_kit.parser import AtRule, Declaration, ParseError, RuleBlock, parse_scss


# ---------------------------------------------------------------------------
# Rule blocks and declarations
# ---------------------------------------------------------------------------


class TestRuleBlocks:
    def test_simple_rule(self) -> None:
        sheet = parse_scss(".card { font-size: r.resp(32px, 24px, h1); }")
        (block,) = sheet.children
        assert isinstance(block, RuleBlock)
        assert block.selector == ".card"
        assert block.selectors == (".card",)
        assert block.children == (
            Declaration(prop="font-size", value="r.resp(32px, 24px, h1)", line=1),
        )

    def test_selector_list(self) -> None:
        (block,) = parse_scss(".a, .b > .c { }").children
        assert block.selectors == (".a", ".b > .c")

    def test_pseudo_selector_is_not_a_declaration(self) -> None:
        (block,) = parse_scss("a:hover { color: red; }").children
        assert isinstance(block, RuleBlock)
        assert block.selector == "a:hover"

    def test_nested_rules(self) -> None:
        (outer,) = parse_scss(".a { .b { width: 1px; } }").children
        (inner,) = outer.children
        assert isinstance(inner, RuleBlock)
        assert inner.selector == ".b"

    def test_last_declaration_without_semicolon(self) -> None:
        (block,) = parse_scss(".a { color: red; width: 1px }").children
        assert [d.prop for d in block.children] == ["color", "width"]
        assert block.children[1].value == "1px"

    def test_important_split_off(self) -> None:
        (block,) = parse_scss(".a { margin: 0 ! IMPORTANT; }").children
        decl = block.children[0]
        assert decl.value == "0"
        assert decl.important

    def test_empty_statements_ignored(self) -> None:
        (block,) = parse_scss(".a { ;; color: red;; }").children
        assert len(block.children) == 1

    def test_bare_block(self) -> None:
        (block,) = parse_scss("{ color: red; }").children
        assert block == RuleBlock(selector="", children=block.children)
        assert block.selectors == ()

    def test_nested_property_block_skipped(self) -> None:
        (block,) = parse_scss(".a { font: { family: serif; } color: red; }").children
        assert [d.prop for d in block.children] == ["color"]

    def test_line_numbers(self) -> None:
        (block,) = parse_scss("\n.a {\n  color: red;\n}\n").children
        assert block.line == 2
        assert block.children[0].line == 3


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestAtRules:
    def test_use_statement(self) -> None:
        (rule,) = parse_scss('@use "./responsive" as r;').children
        assert rule == AtRule(name="use", params='"./responsive" as r', line=1)

    def test_media_block(self) -> None:
        (rule,) = parse_scss(
            "@media screen and (max-width: 850px) { .a { color: red; } }"
        ).children
        assert isinstance(rule, AtRule)
        assert rule.name == "media"
        assert rule.params == "screen and (max-width: 850px)"
        assert isinstance(rule.children[0], RuleBlock)

    def test_include_with_content_block(self) -> None:
        (block,) = parse_scss(".a { @include bp(md) { width: 1px; } }").children
        (include,) = block.children
        assert include.name == "include"
        assert include.params == "bp(md)"

    def test_mixin_definition(self) -> None:
        (mixin,) = parse_scss("@mixin card($pad) { padding: $pad; }").children
        assert mixin.name == "mixin"
        assert mixin.children[0].value == "$pad"


# ---------------------------------------------------------------------------
# Lexical details
# ---------------------------------------------------------------------------


class TestLexing:
    def test_comments_dropped(self) -> None:
        sheet = parse_scss("/* a { } */\n// b { }\n.c { color: red; /* d; */ }")
        (block,) = sheet.children
        assert block.selector == ".c"
        assert [d.prop for d in block.children] == ["color"]

    def test_strings_may_contain_braces(self) -> None:
        (block,) = parse_scss('.a { content: "{;}"; }').children
        assert block.children[0].value == '"{;}"'

    def test_interpolation_in_selector(self) -> None:
        (block,) = parse_scss(".icon-#{$name} { width: 1px; }").children
        assert block.selector == ".icon-#{$name}"

    def test_url_with_double_slash(self) -> None:
        (block,) = parse_scss(".a { background: url(//cdn.example.com/x.png); }").children
        assert block.children[0].value == "url(//cdn.example.com/x.png)"

    def test_hex_color(self) -> None:
        (block,) = parse_scss(".a { color: #fff; }").children
        assert block.children[0].value == "#fff"

    def test_division_slash(self) -> None:
        (block,) = parse_scss(".a { font: 12px/1.5 serif; }").children
        assert block.children[0].value == "12px/1.5 serif"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_unclosed_block(self) -> None:
        with pytest.raises(ParseError):
            parse_scss(".a { color: red;")

    def test_stray_closing_brace(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_scss(".a { }\n}")
        assert exc_info.value.line == 2

    def test_unclosed_string(self) -> None:
        with pytest.raises(ParseError):
            parse_scss('.a { content: "oops; }')
