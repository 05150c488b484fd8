"""Validation steps run over an app package before it is uploaded."""

from .config import SanitizerPolicy, load_policy
from .errors import DIRTY_SVG, ValidationError
from .package import AppFile, AppPackage
from .report import SvgCheckResult
from .sanitizer import sanitize
from .svg import call, check_svg_files

__all__ = [
    "DIRTY_SVG",
    "AppFile",
    "AppPackage",
    "SanitizerPolicy",
    "SvgCheckResult",
    "ValidationError",
    "call",
    "check_svg_files",
    "load_policy",
    "sanitize",
]
