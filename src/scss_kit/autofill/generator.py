"""Render the responsive autofill override stylesheet."""

from __future__ import annotations

from typing import Iterable

from scss_kit.config import CONFIG_NAME, AutofillConfig
from scss_kit.model.rule import RuleRecord
from scss_kit.writer import MARKER

MIXIN_NAME = "responsive_autofill_overrides"


def _header(config: AutofillConfig) -> str:
    return (
        f'@use "./responsive" as {config.namespace};\n'
        "\n"
        f"// {MARKER} from {CONFIG_NAME}\n"
        f"// Source: scanned {config.function}(pc, mobile, type) markers in scss.\n"
        "// Do not edit this file directly; re-run: scss-kit responsive generate\n"
        "\n"
    )


def merge_rules(records: Iterable[RuleRecord]) -> dict[str, dict[str, str]]:
    """Group declarations by selector, last occurrence winning per property.

    Selectors and properties keep the position of their first occurrence.
    """
    merged: dict[str, dict[str, str]] = {}
    for record in sorted(records, key=lambda r: r.order):
        merged.setdefault(record.selector, {})[record.property] = record.value
    return merged


def _indent(text: str, prefix: str) -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


def render_autofill_scss(config: AutofillConfig, records: Iterable[RuleRecord]) -> str:
    """Render *records* as a mixin wrapping one max-width media query.

    With no records the mixin is still emitted, with an empty media query.
    """
    media = f"@media screen and (max-width: {config.mobile_max}px) {{"
    merged = merge_rules(records)

    blocks = []
    for selector, props in merged.items():
        lines = [f"  {prop}: {value};" for prop, value in props.items()]
        blocks.append(f"{selector} {{\n" + "\n".join(lines) + "\n}")

    body = ""
    if blocks:
        body = "\n\n".join(_indent(block, "    ") for block in blocks) + "\n"

    return (
        _header(config)
        + f"@mixin {MIXIN_NAME}() {{\n"
        + f"  {media}\n"
        + body
        + "  }\n"
        + "}\n"
    )
