"""Tests for the scss-kit CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from scss_kit import __version__
from scss_kit.cli.main import cli

CARD = ".card { font-size: r.resp(32px, 24px, h1); }\n"


def _invoke(root: Path, *args: str) -> Result:
    return CliRunner().invoke(cli, ["--root", str(root), *args])


def _payload(result: Result) -> dict:
    return json.loads(result.output)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("init", "generate", "doctor", "create", "responsive", "watch"):
            assert name in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "responsive", "generate")
        assert result.exit_code == 1
        assert _payload(result) == {
            "action": "responsive:generate",
            "ok": False,
            "reason": "Missing scss-kit.config.json in repo root.",
        }


# ---------------------------------------------------------------------------
# Project commands
# ---------------------------------------------------------------------------


class TestProjectCommands:
    def test_init(self, kit_root: Path) -> None:
        result = _invoke(kit_root, "init")
        assert result.exit_code == 0
        payload = _payload(result)
        assert payload["action"] == "init"
        assert payload["generated"]["written"] == "src/styles/_responsive.scss"

    def test_generate(self, kit_root: Path) -> None:
        result = _invoke(kit_root, "generate")
        assert result.exit_code == 0
        assert _payload(result) == {
            "action": "generate",
            "written": "src/styles/_responsive.scss",
            "mode": "created",
        }

    def test_doctor_fails_then_passes(self, kit_root: Path) -> None:
        result = _invoke(kit_root, "doctor")
        assert result.exit_code == 1
        assert _payload(result)["ok"] is False
        _invoke(kit_root, "init")
        result = _invoke(kit_root, "doctor")
        assert result.exit_code == 0
        assert _payload(result) == {"action": "doctor", "ok": True, "issues": []}

    def test_create(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "create", "theme")
        assert result.exit_code == 0
        payload = _payload(result)
        assert payload["configWritten"] is True
        assert (tmp_path / "theme" / "scss-kit.config.json").is_file()
        assert (tmp_path / "theme" / "src" / "styles" / "_responsive.scss").is_file()


# ---------------------------------------------------------------------------
# responsive commands
# ---------------------------------------------------------------------------


class TestResponsiveCommands:
    def test_generate_help_lists_modes(self) -> None:
        result = CliRunner().invoke(cli, ["responsive", "generate", "--help"])
        assert result.exit_code == 0
        for mode in ("created", "overwritten", "unchanged", "conflict_new_file"):
            assert mode in result.output

    def test_rerun_reports_unchanged(self, kit_root: Path, write_scss) -> None:
        write_scss("card.scss", CARD)
        _invoke(kit_root, "responsive", "generate")
        result = _invoke(kit_root, "responsive", "generate")
        assert _payload(result)["mode"] == "unchanged"

    def test_generate_all(self, kit_root: Path, write_scss) -> None:
        write_scss("card.scss", CARD)
        result = _invoke(kit_root, "responsive", "generate")
        assert result.exit_code == 0
        assert _payload(result) == {
            "action": "responsive:generate",
            "ok": True,
            "output": "src/styles/_responsive-autofill.generated.scss",
            "scannedFiles": 1,
            "rules": 1,
            "written": "src/styles/_responsive-autofill.generated.scss",
            "mode": "created",
        }

    def test_generate_entry(self, kit_root: Path, write_scss) -> None:
        write_scss("theme.scss", CARD)
        result = _invoke(kit_root, "responsive", "generate", "src/styles/theme.scss")
        assert result.exit_code == 0
        payload = _payload(result)
        assert payload["target"] == "src/styles/theme.scss"
        assert payload["output"] == "src/styles/_responsive-autofill.theme.generated.scss"

    def test_generate_entry_with_output(self, kit_root: Path, write_scss) -> None:
        write_scss("theme.scss", CARD)
        result = _invoke(
            kit_root, "responsive", "generate", "src/styles/theme.scss", "build/_auto.scss"
        )
        assert result.exit_code == 0
        assert (kit_root / "build" / "_auto.scss").is_file()

    def test_generate_missing_target(self, kit_root: Path) -> None:
        result = _invoke(kit_root, "responsive", "generate", "src/styles/nope.scss")
        assert result.exit_code == 1
        assert _payload(result)["reason"] == "file not found: src/styles/nope.scss"

    def test_conflict_reported(self, kit_root: Path, write_scss) -> None:
        write_scss("_responsive-autofill.generated.scss", "// mine\n")
        result = _invoke(kit_root, "responsive", "generate")
        assert result.exit_code == 0
        payload = _payload(result)
        assert payload["mode"] == "conflict_new_file"
        assert payload["written"] == "src/styles/_responsive-autofill.generated.scss.new"

    def test_invalid_function(self, configure, kit_root: Path) -> None:
        configure(autofill={"function": "resp"})
        result = _invoke(kit_root, "responsive", "generate")
        assert result.exit_code == 1
        assert "Invalid autofill.function: resp" in _payload(result)["reason"]

    def test_invalid_mobile_max(self, configure, kit_root: Path) -> None:
        configure(autofill={"mobileMax": "wide"})
        result = _invoke(kit_root, "responsive", "generate")
        assert result.exit_code == 1
        assert _payload(result)["reason"].startswith("Invalid autofill.mobileMax")

    def test_entries_without_config(self, kit_root: Path) -> None:
        result = _invoke(kit_root, "responsive", "entries")
        assert result.exit_code == 1
        assert "missing autofill.entries" in _payload(result)["reason"]

    def test_entries_partial_failure(self, configure, kit_root: Path, write_scss) -> None:
        write_scss("a.scss", CARD)
        configure(autofill={"entries": ["src/styles/a.scss", "src/styles/b.scss"]})
        result = _invoke(kit_root, "responsive", "entries")
        assert result.exit_code == 1
        payload = _payload(result)
        assert payload["ok"] is False
        assert [e["ok"] for e in payload["entries"]] == [True, False]

    def test_extract(self, kit_root: Path, write_scss) -> None:
        write_scss("card.scss", ".card {\n  padding: 24px;\n}\n")
        result = _invoke(kit_root, "responsive", "extract", "src/styles/card.scss")
        assert result.exit_code == 0
        payload = _payload(result)
        assert payload["written"] == "scss-kit/responsive-extract.json"
        assert payload["count"] == 1
        report = json.loads((kit_root / "scss-kit" / "responsive-extract.json").read_text())
        assert report["rules"][0]["property"] == "padding"

    def test_extract_missing_file(self, kit_root: Path) -> None:
        result = _invoke(kit_root, "responsive", "extract", "nope.scss")
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# watch commands
# ---------------------------------------------------------------------------


class TestWatchCommands:
    @pytest.mark.parametrize("name", ["css", "responsive"])
    def test_help(self, name: str) -> None:
        result = CliRunner().invoke(cli, ["watch", name, "--help"])
        assert result.exit_code == 0
        assert "--interval" in result.output

    def test_single_change_ignored(self, kit_root: Path, write_scss) -> None:
        write_scss("_responsive-autofill.generated.scss", "")
        result = _invoke(
            kit_root, "watch", "responsive", "src/styles/_responsive-autofill.generated.scss"
        )
        assert result.exit_code == 0
        assert _payload(result)["ignored"] == "src/styles/_responsive-autofill.generated.scss"

    def test_single_entry_change(self, kit_root: Path, write_scss) -> None:
        write_scss("theme.scss", CARD)
        result = _invoke(kit_root, "watch", "responsive", "src/styles/theme.scss")
        assert result.exit_code == 0
        payload = _payload(result)
        assert payload["ok"] is True
        assert payload["rules"] == 1

    def test_partial_change_without_entries(self, kit_root: Path, write_scss) -> None:
        write_scss("_card.scss", CARD)
        result = _invoke(kit_root, "watch", "responsive", "src/styles/_card.scss")
        assert result.exit_code == 1
        assert "missing autofill.entries" in _payload(result)["reason"]
