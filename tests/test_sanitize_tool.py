from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

from markup_samples import CLEAN_MARKUP, ONCLICK_MARKUP

REPO_ROOT = Path(__file__).resolve().parents[1]
TOOL = REPO_ROOT / "tools" / "sanitize_svg.py"


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, str(TOOL), *args],
        cwd=REPO_ROOT,
        capture_output=True,
        text=True,
        check=False,
    )


def _make_package(tmp_path: Path) -> Path:
    assets = tmp_path / "app" / "assets"
    assets.mkdir(parents=True)
    (assets / "clean.svg").write_text(CLEAN_MARKUP, encoding="utf-8")
    (assets / "dirty.svg").write_text(ONCLICK_MARKUP, encoding="utf-8")
    return tmp_path / "app"


def test_tool_rewrites_dirty_svg_and_passes(tmp_path: Path) -> None:
    package_dir = _make_package(tmp_path)
    report = tmp_path / "report.json"

    result = _run(str(package_dir), "--report", str(report))

    assert result.returncode == 0, result.stdout + result.stderr
    payload = json.loads(result.stdout)
    assert payload["status"] == "pass"
    assert payload["errors"] == []
    assert len(payload["warnings"]) == 1
    assert "assets/dirty.svg" in payload["warnings"][0]
    assert json.loads(report.read_text()) == payload
    assert (package_dir / "assets" / "dirty.svg").read_text(encoding="utf-8") == CLEAN_MARKUP


def test_tool_dry_run_reports_errors_without_writing(tmp_path: Path) -> None:
    package_dir = _make_package(tmp_path)

    result = _run(str(package_dir), "--dry-run")

    assert result.returncode == 1
    payload = json.loads(result.stdout)
    assert payload["status"] == "fail"
    assert [error["data"] for error in payload["errors"]] == [{"svg": "assets/dirty.svg"}]
    assert (package_dir / "assets" / "dirty.svg").read_text(encoding="utf-8") == ONCLICK_MARKUP


def test_tool_rejects_bad_policy(tmp_path: Path) -> None:
    package_dir = _make_package(tmp_path)
    policy = tmp_path / "policy.yml"
    policy.write_text("- not a mapping\n")

    result = _run(str(package_dir), "--policy", str(policy))

    assert result.returncode == 1
    assert "E1001_CONFIG_ERROR" in result.stderr
