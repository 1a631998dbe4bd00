"""Tests for the resp() call rewriter."""

from scss_kit.autofill.rewriter import CallToken, rewrite_calls

TOKEN = CallToken("r", "resp")


# ---------------------------------------------------------------------------
# CallToken
# ---------------------------------------------------------------------------


class TestCallToken:
    def test_qualified_name(self) -> None:
        assert TOKEN.qualified == "r.resp"

    def test_opener_includes_paren(self) -> None:
        assert CallToken("fx", "fluid").opener == "fx.fluid("


# ---------------------------------------------------------------------------
# rewrite_calls
# ---------------------------------------------------------------------------


class TestRewriteCalls:
    def test_single_call(self) -> None:
        result = rewrite_calls("r.resp(32px, 24px, h1)", TOKEN)
        assert result.changed
        assert result.value == "r.clamp_mb(24px, r.min_px(24px, h1, mobile))"

    def test_no_call_is_unchanged(self) -> None:
        result = rewrite_calls("24px", TOKEN)
        assert not result.changed
        assert result.value == "24px"

    def test_two_arguments_kept_verbatim(self) -> None:
        result = rewrite_calls("r.resp(32px, 24px)", TOKEN)
        assert not result.changed
        assert result.value == "r.resp(32px, 24px)"

    def test_extra_arguments_ignored(self) -> None:
        result = rewrite_calls("r.resp(32px, 24px, h1, 0.5)", TOKEN)
        assert result.value == "r.clamp_mb(24px, r.min_px(24px, h1, mobile))"

    def test_surrounding_text_preserved(self) -> None:
        result = rewrite_calls("0 r.resp(20px, 16px, element-gap) auto", TOKEN)
        assert result.value == (
            "0 r.clamp_mb(16px, r.min_px(16px, element-gap, mobile)) auto"
        )

    def test_multiple_calls(self) -> None:
        result = rewrite_calls(
            "r.resp(10px, 8px, body) r.resp(20px, 16px, card-gap)", TOKEN
        )
        assert result.value == (
            "r.clamp_mb(8px, r.min_px(8px, body, mobile)) "
            "r.clamp_mb(16px, r.min_px(16px, card-gap, mobile))"
        )

    def test_nested_parentheses_in_arguments(self) -> None:
        result = rewrite_calls(
            "r.resp(math.div(64px, 2), calc(10px + 2px), h2)", TOKEN
        )
        assert result.value == (
            "r.clamp_mb(calc(10px + 2px), r.min_px(calc(10px + 2px), h2, mobile))"
        )

    def test_comma_inside_quotes(self) -> None:
        result = rewrite_calls("r.resp(1px, 'a,b', h1)", TOKEN)
        assert result.value == "r.clamp_mb('a,b', r.min_px('a,b', h1, mobile))"

    def test_paren_inside_quotes(self) -> None:
        result = rewrite_calls('r.resp(1px, ")", h1)', TOKEN)
        assert result.value == 'r.clamp_mb(")", r.min_px(")", h1, mobile))'

    def test_unbalanced_call_left_as_is(self) -> None:
        result = rewrite_calls("r.resp(32px, 24px, h1", TOKEN)
        assert not result.changed
        assert result.value == "r.resp(32px, 24px, h1"

    def test_unbalanced_call_after_good_call(self) -> None:
        result = rewrite_calls("r.resp(2px, 1px, icon) r.resp(3px", TOKEN)
        assert result.changed
        assert result.value == "r.clamp_mb(1px, r.min_px(1px, icon, mobile)) r.resp(3px"

    def test_custom_namespace(self) -> None:
        token = CallToken("fx", "fluid")
        result = rewrite_calls("fx.fluid(40px, 30px, h3)", token)
        assert result.value == "fx.clamp_mb(30px, fx.min_px(30px, h3, mobile))"

    def test_other_function_not_rewritten(self) -> None:
        result = rewrite_calls("r.clamp_pc(32px, 24px, h1)", TOKEN)
        assert not result.changed
