from __future__ import annotations

# ruff: noqa: E402  # allow docstring before imports

"""Public API and CLI entrypoint for the tip form.

Re-exports the main API from `tiptime` so that

    import tip as tipmod

works without knowing the package layout. Also provides `python tip.py` entry.
"""

import importlib.metadata as importlib_metadata
import sys

from tiptime import (
    DEFAULT_TIP_PERCENT,
    FormClosedError,
    LocaleError,
    TipForm,
    TipResult,
    active_locale,
    calculate_tip,
    compute_formatted_tip,
    compute_tip,
    currency_for_locale,
    fmt_money,
    parse_amount,
    parse_percent,
)
from tiptime.cli import run_cli

try:
    _distribution_version = importlib_metadata.version("tiptime")
except importlib_metadata.PackageNotFoundError:
    __version__ = "0+unknown"
else:
    __version__ = _distribution_version or "0+unknown"

__all__ = [
    "__version__",
    "TipResult",
    "calculate_tip",
    "compute_tip",
    "compute_formatted_tip",
    "DEFAULT_TIP_PERCENT",
    "parse_amount",
    "parse_percent",
    "active_locale",
    "currency_for_locale",
    "fmt_money",
    "LocaleError",
    "TipForm",
    "FormClosedError",
    "run_cli",
]

if __name__ == "__main__":
    sys.exit(run_cli())
