"""
Motor de cálculo de la calculadora.

Une las tres etapas de una evaluación: limpieza de la expresión de la
pantalla, evaluación aritmética y formato del resultado. Ninguna falla se
propaga como excepción: el resultado es siempre un ``EvaluationOutcome``.

Contrato de interfaz:
    - evaluate(expression: str) -> EvaluationOutcome
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import config
from expression_sanitizer import InvalidExpression, sanitize
from formula_evaluator import EvaluationError, FormulaEvaluator
from result_formatter import format_number

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    INVALID_EXPRESSION = "invalid_expression"
    EVALUATION_FAILURE = "evaluation_failure"


@dataclass(frozen=True)
class EvaluationOutcome:
    """Resultado de pulsar "=": un texto formateado o un tipo de error."""

    value: str | None = None
    error: ErrorKind | None = None

    @classmethod
    def success(cls, value: str) -> EvaluationOutcome:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> EvaluationOutcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display_text(self) -> str:
        # El usuario solo ve un marcador genérico, sin detalle
        return self.value if self.ok else config.ERROR_MARKER


class CalculatorEngine:
    """Evalúa el texto de la pantalla y devuelve el resultado listo para mostrar."""

    def __init__(self, evaluator: FormulaEvaluator | None = None):
        self._evaluator = evaluator if evaluator is not None else FormulaEvaluator()

    # ── Evaluación principal ─────────────────────────────────────

    def evaluate(self, expression: str) -> EvaluationOutcome:
        try:
            sanitized = sanitize(expression)
        except InvalidExpression as exc:
            logger.debug("Expresión inválida %r: %s", expression, exc)
            return EvaluationOutcome.failure(ErrorKind.INVALID_EXPRESSION)

        try:
            value = self._evaluator.evaluate(sanitized)
        except EvaluationError as exc:
            logger.debug("No se pudo evaluar %r: %s", sanitized, exc)
            return EvaluationOutcome.failure(ErrorKind.EVALUATION_FAILURE)

        formatted = format_number(value)
        if formatted == config.ERROR_MARKER:
            # NaN, infinito o fuera de rango: mismo trato que un fallo
            logger.debug("Resultado no representable para %r: %s", sanitized, value)
            return EvaluationOutcome.failure(ErrorKind.EVALUATION_FAILURE)

        return EvaluationOutcome.success(formatted)
