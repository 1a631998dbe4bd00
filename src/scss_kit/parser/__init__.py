from scss_kit.parser.errors import ParseError
from scss_kit.parser.nodes import AtRule, Declaration, RuleBlock, Stylesheet
from scss_kit.parser.transformer import parse_scss

__all__ = [
    "AtRule",
    "Declaration",
    "ParseError",
    "RuleBlock",
    "Stylesheet",
    "parse_scss",
]
