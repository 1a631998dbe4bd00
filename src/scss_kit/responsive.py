"""Generate the base ``_responsive.scss`` helper from the coefficient tables."""

from __future__ import annotations

from typing import Any, Mapping

from scss_kit.config import CONFIG_NAME, KitConfig
from scss_kit.errors import ConfigurationError
from scss_kit.writer import MARKER, WritePlan, write_safely


def to_scss_map(table: Mapping[str, Any]) -> str:
    entries = "\n".join(f"  {key}: {value}," for key, value in table.items())
    return f"(\n{entries}\n)"


def _coefficients(kit: KitConfig) -> tuple[dict[str, Any], dict[str, Any]]:
    coefficients = kit.section("coefficients")
    mobile = coefficients.get("mobile")
    desktop = coefficients.get("desktop")
    if not isinstance(mobile, dict) or not isinstance(desktop, dict):
        raise ConfigurationError(
            "coefficients.mobile and coefficients.desktop must be objects"
        )
    return mobile, desktop


def render_responsive_scss(kit: KitConfig) -> str:
    """Render the helper module: coefficient maps plus clamp functions."""
    mobile, desktop = _coefficients(kit)
    design = kit.section("design")
    desktop_width = design.get("desktopWidth", 1920)
    mobile_width = design.get("mobileWidth", 750)

    return f"""@use "sass:map";
@use "sass:math";
@use "sass:list";
@use "sass:meta";

// {MARKER} from {CONFIG_NAME}
// Edit {CONFIG_NAME} to change design sizes / coefficient tables.

// Design widths:
// - desktop: {desktop_width}
// - mobile: {mobile_width}

$coef-mobile: {to_scss_map(mobile)};

$coef-desktop: {to_scss_map(desktop)};

@function _to-px($value) {{
  @return if(math.is-unitless($value), $value * 1px, $value);
}}

@function _to-num($value) {{
  @if meta.type-of($value) != number {{
    @error "Expected a number, got: #{{meta.type-of($value)}}";
  }}
  @if math.is-unitless($value) {{
    @return $value;
  }}
  @if math.unit($value) != 'px' {{
    @error "Expected px or unitless number, got: #{{math.unit($value)}}";
  }}
  @return math.div($value, 1px);
}}

@function coef($type, $range: mobile) {{
  $table: if($range == desktop, $coef-desktop, $coef-mobile);
  @if map.has-key($table, $type) {{
    @return map.get($table, $type);
  }}
  @error "Unknown coef type: #{{$type}}";
}}

// Minimum clamp value derived from the {mobile_width} design value and coefficient.
@function min_px($mobile, $type, $range: mobile, $override-coef: null) {{
  $v: _to-px($mobile);

  // Mobile typography:
  // - scale the {mobile_width}px design to a 375px viewport
  // - readable floors: h1 >= 16px, h2 >= 14px, other text >= 12px
  // - never exceed the design value
  @if $range == mobile and $override-coef == null {{
    $typography-types: (h1, h2, h3, body, small, button-text);
    @if list.index($typography-types, $type) {{
      $scaled-375: $v * math.div(375, {mobile_width});
      $floor: if($type == h1, 16px, if($type == h2, 14px, 12px));
      @return math.min($v, math.max($scaled-375, $floor));
    }}
  }}

  $c: if($override-coef == null, coef($type, $range), $override-coef);
  @return $v * $c;
}}

// Desktop clamp: min, calc(pc * var(--px-to-vw)), pc
@function clamp_pc($pc, $min) {{
  $v: _to-px($pc);
  $n: _to-num($pc);
  @return clamp(#{{$min}}, calc(#{{$n}} * var(--px-to-vw)), #{{$v}});
}}

// Mobile clamp: min, calc(mobile * var(--px-to-vw-mb)), mobile
@function clamp_mb($mobile, $min) {{
  $v: _to-px($mobile);
  $n: _to-num($mobile);
  @return clamp(#{{$min}}, calc(#{{$n}} * var(--px-to-vw-mb)), #{{$v}});
}}

// resp(): desktop value with the mobile value and type embedded for autofill scanning
@function resp($pc, $mobile, $type) {{
  @if meta.type-of($pc) != number {{
    @error "resp() expects a number (px) for pc value";
  }}
  @return clamp_pc($pc, min_px($pc, $type, desktop));
}}
"""


def write_responsive_helper(kit: KitConfig) -> WritePlan:
    return write_safely(kit.responsive_helper_path, render_responsive_scss(kit))
