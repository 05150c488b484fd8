"""Sanitize the SVG assets bundled with an app.

Every SVG under ``assets/`` is run through the pruning sanitizer. Clean files
are left alone. A file whose markup changes is overwritten with the sanitized
version and the author gets a warning; if the overwrite fails the file is
reported as a ``dirty_svg`` validation error instead.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Protocol

from .errors import DIRTY_SVG, ValidationError
from .i18n import translate
from .report import SvgCheckResult
from .sanitizer import sanitize

logger = logging.getLogger(__name__)

SANITISED_SVG_WARNING = "txt.apps.admin.warning.sanitised_svg"

Writer = Callable[[str, str], None]


class SvgFile(Protocol):
    relative_path: str

    def read(self) -> str: ...


class SvgPackage(Protocol):
    warnings: list[str]

    @property
    def svg_files(self) -> Iterable[SvgFile]: ...


def _overwrite(relative_path: str, content: str) -> None:
    Path(relative_path).write_text(content, encoding="utf-8")


def check_svg_files(
    svg_files: Iterable[SvgFile],
    write: Writer | None = None,
    translate_message: Callable[..., str] | None = None,
    sanitizer: Callable[[str], str] | None = None,
) -> SvgCheckResult:
    write = write or _overwrite
    translate_message = translate_message or translate
    sanitizer = sanitizer or sanitize

    result = SvgCheckResult()
    for svg in svg_files:
        markup = svg.read()
        clean_markup = sanitizer(markup)
        filepath = svg.relative_path

        if clean_markup == markup:
            logger.debug("%s is clean", filepath)
            continue
        try:
            write(filepath, clean_markup)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Could not overwrite %s with sanitized markup: %s", filepath, exc)
            result.errors.append(ValidationError(DIRTY_SVG, {"svg": filepath}))
            continue
        logger.info("Rewrote %s with sanitized markup", filepath)
        result.warnings.append(translate_message(SANITISED_SVG_WARNING, svg=filepath))
    return result


def call(package: SvgPackage, write: Writer | None = None) -> list[ValidationError]:
    """Check ``package.svg_files``, extend ``package.warnings`` and return the errors."""
    if write is None:
        write = getattr(package, "write_file", None)
    result = check_svg_files(package.svg_files, write=write)
    package.warnings.extend(result.warnings)
    return result.errors
