"""Project configuration loaded from ``scss-kit.config.json``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from scss_kit.autofill.rewriter import CallToken
from scss_kit.errors import ConfigurationError

CONFIG_NAME = "scss-kit.config.json"

DEFAULT_FUNCTION = "r.resp"
DEFAULT_MOBILE_MAX = 850
DEFAULT_SCSS_SRC_DIR = "src/styles"
DEFAULT_CSS_OUT_DIR = "assets"
DEFAULT_AUTOFILL_OUTPUT = "src/styles/_responsive-autofill.generated.scss"


def to_posix(path: Path | str) -> str:
    return str(path).replace("\\", "/")


@dataclass(frozen=True)
class AutofillConfig:
    """Settings for one ``resp()`` autofill run."""

    namespace: str
    function_name: str
    mobile_max: int = DEFAULT_MOBILE_MAX
    scan_dirs: tuple[Path, ...] = ()
    output_path: Path = Path(DEFAULT_AUTOFILL_OUTPUT)
    entries: tuple[str, ...] = ()

    @property
    def token(self) -> CallToken:
        return CallToken(self.namespace, self.function_name)

    @property
    def function(self) -> str:
        return self.token.qualified


def parse_function(value: object) -> tuple[str, str]:
    """Split ``<ns>.<name>`` into its two parts."""
    parts = value.split(".") if isinstance(value, str) else []
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ConfigurationError(
            f"Invalid autofill.function: {value}. "
            "Expected format: <ns>.<name> (e.g. r.resp)"
        )
    return parts[0], parts[1]


def parse_mobile_max(value: object) -> int:
    """Breakpoint in px; a whole number or a numeric string."""
    if not isinstance(value, bool):
        try:
            return int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            pass
    raise ConfigurationError(
        f"Invalid autofill.mobileMax: {value!r}. Expected a number of px"
    )


@dataclass(frozen=True)
class KitConfig:
    """Parsed config file plus the project root it belongs to."""

    root: Path
    data: dict[str, Any] = field(default_factory=dict, hash=False)

    # --- loading --------------------------------------------------------------

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_NAME

    @classmethod
    def load(cls, root: Path) -> KitConfig:
        """Read ``scss-kit.config.json`` from *root*."""
        path = root / CONFIG_NAME
        if not path.exists():
            raise ConfigurationError(f"Missing {CONFIG_NAME} in repo root.")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {CONFIG_NAME}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"{CONFIG_NAME} must contain a JSON object")
        return cls(root=root, data=data)

    # --- paths ----------------------------------------------------------------

    def section(self, name: str) -> dict[str, Any]:
        value = self.data.get(name)
        return value if isinstance(value, dict) else {}

    def resolve(self, path: Path | str) -> Path:
        """Absolute path for *path*, relative paths taken from the root."""
        path = Path(path)
        return path if path.is_absolute() else self.root / path

    def relative(self, path: Path) -> str:
        """Root-relative POSIX form of *path*, for reports."""
        try:
            return to_posix(path.resolve().relative_to(self.root.resolve()))
        except ValueError:
            return to_posix(path)

    @property
    def scss_src_rel(self) -> str:
        return self.section("paths").get("scssSrcDir") or DEFAULT_SCSS_SRC_DIR

    @property
    def scss_src_dir(self) -> Path:
        return self.resolve(self.scss_src_rel)

    @property
    def css_out_dir(self) -> Path:
        return self.resolve(self.section("paths").get("cssOutDir") or DEFAULT_CSS_OUT_DIR)

    @property
    def responsive_helper_path(self) -> Path:
        return self.scss_src_dir / "_responsive.scss"

    def entry_output_path(self, entry: Path) -> Path:
        """Default per-entry autofill output for *entry*."""
        base = entry.name[: -len(".scss")] if entry.name.endswith(".scss") else entry.stem
        return self.scss_src_dir / f"_responsive-autofill.{base}.generated.scss"

    # --- autofill -------------------------------------------------------------

    def autofill(self) -> AutofillConfig:
        """Build the AutofillConfig, validating the function name and entries."""
        section = self.section("autofill")
        function = section.get("function")
        namespace, function_name = parse_function(
            DEFAULT_FUNCTION if function is None else function
        )
        scan_dirs = section.get("scanDirs") or [self.scss_src_rel]
        output = section.get("output") or DEFAULT_AUTOFILL_OUTPUT

        entries = section.get("entries") or []
        if not isinstance(entries, list):
            raise ConfigurationError(
                "autofill.entries must be an array of entry scss paths"
            )

        return AutofillConfig(
            namespace=namespace,
            function_name=function_name,
            mobile_max=parse_mobile_max(section.get("mobileMax", DEFAULT_MOBILE_MAX)),
            scan_dirs=tuple(self.resolve(d) for d in scan_dirs),
            output_path=self.resolve(output),
            entries=tuple(str(e) for e in entries if e),
        )


def default_config_data() -> dict[str, Any]:
    """Starter configuration written by ``scss-kit create``."""
    return {
        "design": {
            "desktopWidth": 1920,
            "mobileWidth": 750,
        },
        "paths": {
            "scssSrcDir": DEFAULT_SCSS_SRC_DIR,
            "cssOutDir": DEFAULT_CSS_OUT_DIR,
        },
        "autofill": {
            "function": DEFAULT_FUNCTION,
            "mobileMax": DEFAULT_MOBILE_MAX,
            "scanDirs": [DEFAULT_SCSS_SRC_DIR],
            "output": DEFAULT_AUTOFILL_OUTPUT,
            "entries": [],
        },
        "coefficients": {
            "mobile": {
                "h1": 0.5,
                "h2": 0.625,
                "h3": 0.75,
                "body": 0.857,
                "small": 1,
                "section-gap": 0.5,
                "card-gap": 0.6,
                "element-gap": 0.75,
                "button-text": 1,
                "icon": 0.67,
            },
            "desktop": {
                "h1": 0.625,
                "h2": 0.67,
                "h3": 0.75,
                "body": 0.875,
                "small": 1,
                "section-gap": 0.5,
                "card-gap": 0.6,
                "element-gap": 0.67,
                "button-text": 1,
                "icon": 0.625,
            },
        },
    }
