"""Tests for the ``onboarding-plan`` CLI: JSON output and exit codes."""

import json

import pytest

from onboarding_rules.cli import cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("ONBOARDING_CATALOG_DIR", raising=False)
    monkeypatch.delenv("ONBOARDING_LOG_LEVEL", raising=False)


def _run(capsys, *argv):
    cli(list(argv))
    return json.loads(capsys.readouterr().out)


def test_default_plan(capsys):
    plan = _run(capsys, "--type", "NEWBIE", "--start-date", "2026-03-22", "--today", "2026-03-02")
    assert plan["onboarding_module"] == "A_NURTURING"
    assert plan["onboarding_module_label"] == "육성형"
    assert plan["timing_variable"] == "COMFORTABLE"
    assert plan["d_day"] == 20
    assert [s["step_number"] for s in plan["steps"]] == [1, 2, 3, 4, 5, 6]
    assert plan["module_configuration"]["3 (Content)"] == "PM_LED"


def test_korean_type_and_urgent(capsys):
    plan = _run(capsys, "--type", "경력", "--start-date", "2026-03-05", "--today", "2026-03-02")
    assert plan["instructor_type"] == "EXPERIENCED"
    assert plan["onboarding_module"] == "D_QUICK_ADAPTATION"
    assert [s["step_type"] for s in plan["steps"]] == ["PM_LED", "DELAY", "SELF_CHECK", "SELF_CHECK"]


def test_explicit_steps(capsys):
    plan = _run(
        capsys,
        "--type", "RE_CONTRACT", "--start-date", "2026-03-05", "--today", "2026-03-02",
        "--steps", "1", "3", "5", "7",
    )
    assert [s["step_number"] for s in plan["steps"]] == [1, 3]


def test_unknown_step_exits_non_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli(["--start-date", "2026-03-05", "--steps", "42"])
    assert excinfo.value.code == 1
    assert "error:" in capsys.readouterr().err


def test_missing_catalog_exits_non_zero(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("ONBOARDING_CATALOG_DIR", str(tmp_path))
    with pytest.raises(SystemExit) as excinfo:
        cli(["--start-date", "2026-03-05"])
    assert excinfo.value.code == 1
    assert "steps.yaml" in capsys.readouterr().err


def test_bad_date_is_argparse_error():
    with pytest.raises(SystemExit) as excinfo:
        cli(["--start-date", "next week"])
    assert excinfo.value.code == 2
