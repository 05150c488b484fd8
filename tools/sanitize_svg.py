#!/usr/bin/env python3
from __future__ import annotations

import json
import logging
import sys
from functools import partial
from pathlib import Path

import typer

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from app_validations import AppPackage, check_svg_files, load_policy, sanitize  # noqa: E402

app = typer.Typer(add_completion=False, help="Sanitize the SVG assets of an app package.")


def _refuse_write(relative_path: str, content: str) -> None:
    raise PermissionError(f"dry run: not writing {relative_path}")


@app.command()
def main(
    package_dir: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        readable=True,
        help="Root directory of the unpacked app package.",
    ),
    policy: Path | None = typer.Option(
        None,
        "--policy",
        "-p",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Sanitizer policy YAML (defaults to the bundled policy).",
    ),
    report: Path | None = typer.Option(
        None,
        "--report",
        "-o",
        dir_okay=False,
        help="Optional path to write the JSON report.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Do not rewrite files; report every dirty SVG as an error.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each file checked."),
) -> None:
    """Sanitize SVGs under assets/ and emit a JSON report."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        sanitizer_policy = load_policy(policy) if policy is not None else load_policy()
    except (OSError, ValueError) as exc:
        typer.echo(f"ERROR E1001_CONFIG_ERROR: {exc}", err=True)
        typer.echo("HINT: Check the sanitizer policy YAML.", err=True)
        raise typer.Exit(code=1)

    package = AppPackage(package_dir)
    result = check_svg_files(
        package.svg_files,
        write=_refuse_write if dry_run else package.write_file,
        sanitizer=partial(sanitize, policy=sanitizer_policy),
    )
    package.warnings.extend(result.warnings)

    payload = json.dumps(result.to_dict(), indent=2, sort_keys=True)
    if report is not None:
        report.write_text(payload)
    typer.echo(payload)
    raise typer.Exit(code=0 if result.status == "pass" else 1)


if __name__ == "__main__":
    app(prog_name="sanitize-svg")
