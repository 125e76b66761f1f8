from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .formats import active_locale, currency_for_locale, fmt_money

logger = logging.getLogger(__name__)

DEFAULT_TIP_PERCENT = 15.0
HUNDRED = 100


@dataclass(frozen=True)
class TipResult:
    bill_amount: float
    tip_percent: float
    round_up: bool
    tip: float
    formatted: str
    locale: str
    currency: str


def calculate_tip(
    bill_amount: float,
    tip_percent: float = DEFAULT_TIP_PERCENT,
    round_up: bool = False,
) -> float:
    """Return the tip before formatting.

    Negative inputs are not rejected; they simply produce a negative tip.
    """
    tip = tip_percent / HUNDRED * bill_amount
    if round_up and math.isfinite(tip):
        # Keep the sign so a small negative tip rounds to -0.0.
        tip = math.copysign(float(math.ceil(tip)), tip)
    return tip


def compute_tip(
    bill_amount: float,
    tip_percent: float = DEFAULT_TIP_PERCENT,
    round_up: bool = False,
    *,
    locale: Optional[str] = None,
) -> TipResult:
    loc = locale or active_locale()
    currency = currency_for_locale(loc)
    tip = calculate_tip(bill_amount, tip_percent, round_up)
    formatted = fmt_money(tip, locale=loc, currency=currency)
    logger.debug(
        "tip %s%% of %s (round_up=%s) -> %s [%s]",
        tip_percent,
        bill_amount,
        round_up,
        formatted,
        loc,
    )
    return TipResult(
        bill_amount=bill_amount,
        tip_percent=tip_percent,
        round_up=round_up,
        tip=tip,
        formatted=formatted,
        locale=loc,
        currency=currency,
    )


def compute_formatted_tip(
    bill_amount: float,
    tip_percent: float = DEFAULT_TIP_PERCENT,
    round_up: bool = False,
    *,
    locale: Optional[str] = None,
) -> str:
    """Compute the tip and format it as currency of the active locale.

    Example: ``compute_formatted_tip(33, 15, True, locale="en_US") == "$5.00"``.
    """
    return compute_tip(bill_amount, tip_percent, round_up, locale=locale).formatted
