from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import pyperclip
from babel import Locale, UnknownLocaleError, default_locale
from babel.core import get_global
from babel.numbers import format_currency, get_territory_currencies

if TYPE_CHECKING:
    from .tip_core import TipResult

logger = logging.getLogger(__name__)

# --- Locale helpers & constants ---
FALLBACK_LOCALE = "en_US"
NO_CURRENCY = "XXX"  # ISO 4217 "no currency involved"
TIP_LABEL = "Tip Amount: {tip}"


class LocaleError(ValueError):
    """Raised when a locale identifier cannot be resolved."""


def active_locale() -> str:
    """Return the locale used for monetary formatting in this process.

    Reads ``LC_MONETARY`` first, then ``LANGUAGE``, ``LC_ALL``, ``LC_CTYPE`` and
    ``LANG`` the way Babel does. ``C``/``POSIX`` resolve to ``en_US_POSIX``.
    """
    return default_locale("LC_MONETARY") or FALLBACK_LOCALE


def _parse_locale(identifier: str) -> Locale:
    try:
        return Locale.parse(identifier)
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise LocaleError(f"Unknown locale: {identifier!r}") from exc


def _territory(loc: Locale) -> Optional[str]:
    if loc.territory:
        return loc.territory
    # Language-only locales ("fr") borrow the territory of their likely subtags.
    likely = get_global("likely_subtags").get(loc.language)
    if not likely:
        return None
    return _parse_locale(likely).territory


def currency_for_locale(locale: Optional[str] = None) -> str:
    loc = _parse_locale(locale or active_locale())
    territory = _territory(loc)
    if not territory:
        return NO_CURRENCY
    currencies = get_territory_currencies(territory)
    return currencies[0] if currencies else NO_CURRENCY


def fmt_money(
    value: float,
    *,
    locale: Optional[str] = None,
    currency: Optional[str] = None,
) -> str:
    """Format money for display using the CLDR rules of ``locale``.

    Symbol placement, grouping and the number of fractional digits all come
    from Babel; ``currency`` defaults to the one used in the locale's territory.
    """
    loc = locale or active_locale()
    code = currency or currency_for_locale(loc)
    try:
        return format_currency(value, code, locale=loc)
    except (UnknownLocaleError, ValueError) as exc:
        raise LocaleError(f"Cannot format {code} for locale {loc!r}") from exc


def render_tip_label(result: "TipResult") -> str:
    return TIP_LABEL.format(tip=result.formatted)


# --- Data export helpers ---
def results_to_dict(result: "TipResult") -> dict:
    return {
        "bill_amount": result.bill_amount,
        "tip_percent": result.tip_percent,
        "round_up": result.round_up,
        "tip": result.tip,
        "formatted_tip": result.formatted,
        "locale": result.locale,
        "currency": result.currency,
    }


def copy_to_clipboard(text: str) -> bool:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        logger.warning("Clipboard unavailable: %s", exc)
        return False
    return True
