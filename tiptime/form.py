from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from .parsing import parse_amount, parse_percent
from .tip_core import TipResult, compute_tip

logger = logging.getLogger(__name__)

RenderFunc = Callable[[TipResult], None]


class FormClosedError(RuntimeError):
    """Raised when a torn-down form is mutated."""


@dataclass(frozen=True)
class FormState:
    bill_text: str = ""
    tip_text: str = ""
    round_up: bool = False


class TipForm:
    """State for the single tip screen.

    Holds the raw bill text, tip text and round-up flag. Every mutation
    recomputes the tip from the current state and hands the new
    :class:`TipResult` to each subscribed render function, in subscription
    order. Unparseable text counts as 0.0.
    """

    def __init__(self, *, locale: Optional[str] = None, on_render: Optional[RenderFunc] = None) -> None:
        self._locale = locale
        self._state = FormState()
        self._renderers: List[RenderFunc] = []
        self._closed = False
        if on_render is not None:
            self.subscribe(on_render)

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def bill_amount(self) -> float:
        return parse_amount(self._state.bill_text)

    @property
    def tip_percent(self) -> float:
        return parse_percent(self._state.tip_text)

    @property
    def closed(self) -> bool:
        return self._closed

    def result(self) -> TipResult:
        return compute_tip(
            self.bill_amount,
            self.tip_percent,
            self._state.round_up,
            locale=self._locale,
        )

    def subscribe(self, render: RenderFunc) -> Callable[[], None]:
        self._renderers.append(render)

        def unsubscribe() -> None:
            if render in self._renderers:
                self._renderers.remove(render)

        return unsubscribe

    def set_bill_text(self, text: str) -> TipResult:
        return self._update(bill_text=text)

    def set_tip_text(self, text: str) -> TipResult:
        return self._update(tip_text=text)

    def set_round_up(self, round_up: bool) -> TipResult:
        return self._update(round_up=bool(round_up))

    def reset(self) -> TipResult:
        self._ensure_open()
        self._state = FormState()
        return self.render()

    def render(self) -> TipResult:
        result = self.result()
        for render in list(self._renderers):
            render(result)
        return result

    def close(self) -> None:
        self._renderers.clear()
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise FormClosedError("Form has been closed")

    def _update(self, **changes) -> TipResult:
        self._ensure_open()
        self._state = replace(self._state, **changes)
        logger.debug("form changed: %s", ", ".join(sorted(changes)))
        return self.render()
