from .form import FormClosedError, FormState, TipForm
from .formats import (
    LocaleError,
    active_locale,
    currency_for_locale,
    fmt_money,
    render_tip_label,
    results_to_dict,
)
from .parsing import parse_amount, parse_percent
from .tip_core import (
    DEFAULT_TIP_PERCENT,
    TipResult,
    calculate_tip,
    compute_formatted_tip,
    compute_tip,
)

__all__ = [
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
    "render_tip_label",
    "results_to_dict",
    "LocaleError",
    "TipForm",
    "FormState",
    "FormClosedError",
]
