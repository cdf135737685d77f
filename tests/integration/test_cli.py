import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from checkgate.cli import cli
from checkgate.core.config import config


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def rules_file(tmp_path: Path, rules_yaml: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(rules_yaml, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_rules_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configured rules location at an empty directory."""
    base = tmp_path / "configured"
    base.mkdir()
    monkeypatch.setattr(config.repo_config, "base_path", str(base))
    return base


def test_evaluate_passes(runner: CliRunner, rules_file: Path) -> None:
    result = runner.invoke(cli, ["evaluate", "--rules", str(rules_file), "-s", "tests=true", "-s", "lint=false"])

    assert result.exit_code == 0
    assert "✅ 1 of 2 checks passed, 1 advisory" in result.output


def test_evaluate_fails_on_unmeasured_required(runner: CliRunner, rules_file: Path) -> None:
    result = runner.invoke(cli, ["evaluate", "--rules", str(rules_file), "-s", "lint=true"])

    assert result.exit_code == 1
    assert "🚨 1 blocking: tests" in result.output


def test_evaluate_json(runner: CliRunner, rules_file: Path) -> None:
    result = runner.invoke(cli, ["evaluate", "--rules", str(rules_file), "-s", "tests=yes", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["status"] == "pass"
    assert data["rule_set"] == "project"


def test_signal_pairs_override_signal_file(runner: CliRunner, rules_file: Path, tmp_path: Path) -> None:
    signal_file = tmp_path / "signal.json"
    signal_file.write_text('{"tests": false}', encoding="utf-8")

    result = runner.invoke(
        cli,
        ["evaluate", "--rules", str(rules_file), "--signal-file", str(signal_file), "-s", "tests=true"],
    )

    assert result.exit_code == 0


def test_invalid_signal_exits_with_configuration_error(runner: CliRunner, rules_file: Path) -> None:
    result = runner.invoke(cli, ["evaluate", "--rules", str(rules_file), "-s", "tests=maybe"])

    assert result.exit_code == 2
    assert "Offending rule: `tests`" in result.output


def test_missing_rules_file_exits_with_configuration_error(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["evaluate", "--rules", str(tmp_path / "absent.yaml")])

    assert result.exit_code == 2
    assert "Rules file not found" in result.output


def test_checklist_option(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["evaluate", "--checklist", "security", "--json"])

    assert result.exit_code == 1
    assert json.loads(result.stdout)["rule_set"] == "security"


def test_rules_and_checklist_are_exclusive(runner: CliRunner, rules_file: Path) -> None:
    result = runner.invoke(cli, ["evaluate", "--rules", str(rules_file), "--checklist", "security"])

    assert result.exit_code == 2
    assert "not both" in result.output


def test_defaults_to_configured_rules_file(
    runner: CliRunner, isolated_rules_path: Path, rules_yaml: str
) -> None:
    (isolated_rules_path / "rules.yaml").write_text(rules_yaml, encoding="utf-8")

    result = runner.invoke(cli, ["evaluate", "-s", "tests=true", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["rule_set"] == "project"


def test_falls_back_to_default_checklist(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["evaluate", "--json"])

    assert result.exit_code == 1
    assert json.loads(result.stdout)["rule_set"] == "default"


def test_validate_command(runner: CliRunner, rules_file: Path, tmp_path: Path) -> None:
    ok = runner.invoke(cli, ["validate", str(rules_file)])
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("rules: nope\n", encoding="utf-8")
    bad = runner.invoke(cli, ["validate", str(bad_file)])

    assert ok.exit_code == 0
    assert "valid and contains 2 rules" in ok.output
    assert bad.exit_code == 1


def test_checklists_command(runner: CliRunner) -> None:
    listing = runner.invoke(cli, ["checklists"])
    detail = runner.invoke(cli, ["checklists", "pre-commit"])
    unknown = runner.invoke(cli, ["checklists", "release"])

    assert listing.exit_code == 0
    assert "pre-commit\t7 rules" in listing.output
    assert detail.exit_code == 0
    assert "tests-pass\ttesting\trequired" in detail.output
    assert unknown.exit_code == 2
