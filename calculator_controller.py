"""
Acumulador de entrada de la calculadora.

El estado de la pantalla es un valor inmutable (``ExpressionState``). Cada
botón corresponde a una función pura estado → estado; el controlador guarda el
estado actual, aplica la función y avisa a la vista para que lo vuelva a
dibujar.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from calculator_engine import CalculatorEngine

logger = logging.getLogger(__name__)

# Caracteres que cuentan como operador al final de la expresión.
# El punto decimal se incluye: "5." seguido de "+" queda "5+".
OPERATOR_CHARS = frozenset("+-−×÷*/^.")
MINUS_GLYPHS = ("-", "−")


@dataclass(frozen=True)
class ExpressionState:
    text: str = ""
    has_pending_answer: bool = False
    result: str = ""


# ── Funciones puras de edición ───────────────────────────────────

def append_digit_or_dot(state: ExpressionState, token: str) -> ExpressionState:
    """Añade un dígito o punto. Tras un resultado empieza una expresión nueva."""
    if state.has_pending_answer:
        state = ExpressionState()
    # Sin validar varios puntos por número: el evaluador lo rechazará
    return replace(state, text=state.text + token)


def apply_operator(state: ExpressionState, glyph: str) -> ExpressionState:
    """Añade un operador sin permitir dos seguidos.

    - Expresión vacía: solo se admite el signo menos.
    - Si la expresión acaba en operador, se reemplaza.
    """
    text = state.text
    if not text:
        if glyph in MINUS_GLYPHS:
            return replace(state, text="-", has_pending_answer=False)
        return state

    if text[-1] in OPERATOR_CHARS:
        text = text[:-1] + glyph
    else:
        text += glyph
    return replace(state, text=text, has_pending_answer=False)


def clear(state: ExpressionState) -> ExpressionState:
    return ExpressionState()


def delete_last(state: ExpressionState) -> ExpressionState:
    return replace(state, text=state.text[:-1], has_pending_answer=False)


def evaluate(state: ExpressionState, engine: CalculatorEngine) -> ExpressionState:
    if not state.text.strip():
        return replace(state, result="")

    outcome = engine.evaluate(state.text)
    # La expresión original se conserva para seguir editándola
    return replace(
        state,
        result=outcome.display_text,
        has_pending_answer=outcome.ok,
    )


# ── Controlador ──────────────────────────────────────────────────

class CalculatorController:
    """Dueño del estado de la pantalla; la vista se suscribe con ``on_change``."""

    def __init__(
        self,
        engine: CalculatorEngine | None = None,
        on_change: Callable[[ExpressionState], None] | None = None,
    ):
        self.engine = engine if engine is not None else CalculatorEngine()
        self._on_change = on_change
        self._state = ExpressionState()

    @property
    def state(self) -> ExpressionState:
        return self._state

    def subscribe(self, on_change: Callable[[ExpressionState], None]):
        self._on_change = on_change
        on_change(self._state)

    # ── Acciones ─────────────────────────────────────────────────

    def append_digit_or_dot(self, token: str):
        self._apply("digit", append_digit_or_dot(self._state, token))

    def apply_operator(self, glyph: str):
        self._apply("operator", apply_operator(self._state, glyph))

    def clear(self):
        self._apply("clear", clear(self._state))

    def delete_last(self):
        self._apply("delete", delete_last(self._state))

    def evaluate(self):
        self._apply("equals", evaluate(self._state, self.engine))

    def press(self, key: str):
        """Despacha una pulsación de botón por su etiqueta."""
        if key == "C":
            self.clear()
        elif key == "DEL":
            self.delete_last()
        elif key == "=":
            self.evaluate()
        elif key.isdigit() or key == ".":
            self.append_digit_or_dot(key)
        elif len(key) == 1 and (key in OPERATOR_CHARS or key in "()"):
            self.apply_operator(key)
        else:
            raise ValueError(f"Tecla desconocida: {key!r}")

    def _apply(self, action: str, new_state: ExpressionState):
        if new_state == self._state:
            logger.debug("%s: sin cambios (%r)", action, self._state.text)
            return
        logger.debug("%s: %r -> %r", action, self._state, new_state)
        self._state = new_state
        if self._on_change is not None:
            self._on_change(new_state)
