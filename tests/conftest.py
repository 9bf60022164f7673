"""pytest global configuration: put the repository root on sys.path."""

from __future__ import annotations

from pathlib import Path
import sys

_REPO_ROOT = Path(__file__).resolve().parent
if _REPO_ROOT.name == "tests":
    _REPO_ROOT = _REPO_ROOT.parent

_ROOT_STR = str(_REPO_ROOT)
if _ROOT_STR not in sys.path:
    sys.path.insert(0, _ROOT_STR)
