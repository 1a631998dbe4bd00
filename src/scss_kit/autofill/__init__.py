"""Responsive autofill: turn ``resp()`` markers into mobile override rules."""

from scss_kit.autofill.rewriter import CallToken, RewriteResult, rewrite_calls
from scss_kit.autofill.selectors import SelectorStack, combine_selectors

__all__ = [
    "CallToken",
    "RewriteResult",
    "SelectorStack",
    "combine_selectors",
    "rewrite_calls",
]
