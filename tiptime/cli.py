from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .form import TipForm
from .formats import (
    LocaleError,
    copy_to_clipboard,
    currency_for_locale,
    render_tip_label,
    results_to_dict,
)
from .parsing import parse_percent
from .tip_core import DEFAULT_TIP_PERCENT, TipResult

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tipconfig.json"
ENV_FILENAME = ".env"
TRUE_WORDS = {"1", "true", "yes", "y", "on"}


@dataclass
class AppConfig:
    default_tip_percent: float = DEFAULT_TIP_PERCENT
    locale: Optional[str] = None
    round_up: bool = False


def _format_percent(value: float) -> str:
    s = f"{value:f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s or "0"


def _apply_json(cfg: AppConfig, data: dict) -> None:
    if "default_tip_percent" in data:
        cfg.default_tip_percent = float(data["default_tip_percent"])
    if data.get("locale"):
        cfg.locale = str(data["locale"])
    if "round_up" in data:
        raw = data["round_up"]
        cfg.round_up = raw.strip().lower() in TRUE_WORDS if isinstance(raw, str) else bool(raw)


def _apply_env_line(cfg: AppConfig, line: str) -> None:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return
    k, v = line.split("=", 1)
    k = k.strip().upper()
    v = v.strip().strip('"').strip("'")
    if k == "TIP_DEFAULT_PERCENT":
        cfg.default_tip_percent = float(v.replace("%", ""))
    elif k == "TIP_LOCALE":
        cfg.locale = v or None
    elif k == "TIP_ROUND_UP":
        cfg.round_up = v.lower() in TRUE_WORDS


def load_config(path: Optional[str] = None) -> AppConfig:
    cfg = AppConfig()

    json_candidates: List[Path] = []
    if path:
        json_candidates.append(Path(path).expanduser())
    json_candidates.append(Path.cwd() / CONFIG_FILENAME)
    for p in json_candidates:
        if not p.is_file():
            continue
        try:
            data = json.loads(p.read_text())
            if not isinstance(data, dict):
                raise ValueError("config must be a JSON object")
            _apply_json(cfg, data)
        except (OSError, ValueError, TypeError) as exc:
            logger.warning("Skipping config %s: %s", p, exc)
            continue
        logger.debug("Loaded config from %s", p)
        break

    env_path = Path.cwd() / ENV_FILENAME
    if env_path.is_file():
        try:
            for line in env_path.read_text().splitlines():
                _apply_env_line(cfg, line)
        except (OSError, ValueError) as exc:
            logger.warning("Skipping %s: %s", env_path, exc)
        else:
            logger.debug("Loaded settings from %s", env_path)

    return cfg


def yes_no(prompt: str, *, default_yes: bool = True) -> bool:
    suffix = "[Y/n]" if default_yes else "[y/N]"
    while True:
        ans = input(f"{prompt} {suffix} ").strip().lower()
        if not ans:
            return default_yes
        if ans in {"y", "yes"}:
            return True
        if ans in {"n", "no"}:
            return False
        print("Please answer 'y' or 'n'.")


def _print_label(result: TipResult) -> None:
    print(render_tip_label(result))


def run_interactive(config: AppConfig, *, locale: Optional[str]) -> None:
    print("--- Calculate Tip ---")
    form = TipForm(locale=locale, on_render=_print_label)
    try:
        while True:
            form.set_bill_text(input("Bill Amount: "))
            form.set_tip_text(input("Tip Percentage: "))
            form.set_round_up(yes_no("Round up tip?", default_yes=config.round_up))
            if not yes_no("Calculate another tip?", default_yes=False):
                break
            form.reset()
    finally:
        form.close()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tip calculator: shows the tip for a bill in the currency of your locale."
    )
    parser.add_argument("--bill", help="Bill amount, e.g. 33 or 33.50. Non-numeric text counts as 0")
    parser.add_argument("--tip", default=None, help="Tip percentage, e.g. 15. Default comes from config (15)")
    parser.add_argument("--round-up", action="store_true", default=None, help="Round the tip up to a whole currency unit")
    parser.add_argument("--no-round-up", action="store_false", dest="round_up", default=None, help="Do not round the tip, even if config says so")
    parser.add_argument("--locale", help="Locale for formatting (e.g., en_US, de_DE). Default: the process locale")
    parser.add_argument("--config", help="Path to a JSON config with default_tip_percent, locale, round_up")
    parser.add_argument("--json", action="store_true", help="Output the result as JSON")
    parser.add_argument("--copy", action="store_true", help="Copy the output to clipboard")
    parser.add_argument("--interactive", action="store_true", help="Force interactive mode regardless of provided flags.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run_cli(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    locale_value = args.locale or config.locale
    try:
        currency_for_locale(locale_value)
    except LocaleError as exc:
        parser.error(str(exc))

    if args.interactive or args.bill is None:
        try:
            run_interactive(config, locale=locale_value)
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
        return 0

    round_up = config.round_up if args.round_up is None else args.round_up
    # An omitted --tip takes the configured default; a given but invalid one is 0.
    tip_text = args.tip if args.tip is not None else _format_percent(config.default_tip_percent)
    if parse_percent(tip_text) > 100:
        print("Warning: Tip percentage exceeds 100%.", file=sys.stderr)

    form = TipForm(locale=locale_value)
    form.set_bill_text(args.bill)
    form.set_tip_text(tip_text)
    result = form.set_round_up(round_up)
    form.close()

    if args.json:
        out = json.dumps(results_to_dict(result))
    else:
        out = render_tip_label(result)
    print(out)
    if args.copy:
        if not copy_to_clipboard(out):
            print("(Could not copy to clipboard on this system)", file=sys.stderr)
    return 0
