"""Rewrite ``<ns>.<fn>(pc, mobile, type)`` calls into mobile clamp expressions.

Example, with the default ``r.resp`` function::

    r.resp(32px, 24px, h1)
    -> r.clamp_mb(24px, r.min_px(24px, h1, mobile))
"""

from __future__ import annotations

from dataclasses import dataclass

from scss_kit._text import find_closing_paren, split_top_level

__all__ = ["CallToken", "RewriteResult", "rewrite_calls"]


@dataclass(frozen=True)
class CallToken:
    """The two-part function name that marks a responsive value."""

    namespace: str
    function_name: str

    @property
    def qualified(self) -> str:
        return f"{self.namespace}.{self.function_name}"

    @property
    def opener(self) -> str:
        return f"{self.qualified}("


@dataclass(frozen=True)
class RewriteResult:
    value: str
    changed: bool


def _mobile_clamp(namespace: str, mobile: str, sizing_type: str) -> str:
    return (
        f"{namespace}.clamp_mb({mobile}, "
        f"{namespace}.min_px({mobile}, {sizing_type}, mobile))"
    )


def rewrite_calls(value: str, token: CallToken) -> RewriteResult:
    """Replace every marker call in *value* that has at least three arguments.

    Calls with fewer arguments are kept verbatim. If a call's parentheses
    never balance, the rest of *value* from that call on is kept as-is.
    Text around the calls is preserved exactly.
    """
    opener = token.opener
    out: list[str] = []
    idx = 0
    changed = False

    while idx < len(value):
        hit = value.find(opener, idx)
        if hit == -1:
            out.append(value[idx:])
            break

        out.append(value[idx:hit])
        args_start = hit + len(opener)
        close = find_closing_paren(value, args_start)
        if close is None:
            out.append(value[hit:])
            break

        args = split_top_level(value[args_start:close])
        if len(args) >= 3:
            out.append(_mobile_clamp(token.namespace, args[1], args[2]))
            changed = True
        else:
            out.append(value[hit : close + 1])
        idx = close + 1

    return RewriteResult(value="".join(out), changed=changed)
