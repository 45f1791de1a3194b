"""Parseo y evaluación de expresiones aritméticas ASCII."""

import re

from mpmath import mp

import config


class EvaluationError(ValueError):
    """La expresión no se pudo evaluar (sintaxis o aritmética)."""


class FormulaEvaluator:
    """Evalúa expresiones infijas con + - * / ^ y paréntesis.

    Precedencia estándar: ^ (asociativo a la derecha), luego * /, luego + -.
    Los literales numéricos se promueven a ``mpf`` para evitar los errores de
    redondeo del punto flotante binario.
    """

    _ALLOWED_CHARS = re.compile(r"[\d\s+\-*/^().]*")
    _NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")

    def __init__(self, working_digits: int = config.WORKING_DIGITS):
        self._working_digits = working_digits

    @property
    def working_digits(self) -> int:
        return self._working_digits

    def evaluate(self, expression: str):
        if not expression or not expression.strip():
            raise EvaluationError("Expresión vacía")

        self._validate_raw_expression(expression)
        processed = self._preprocess(expression)
        namespace = {"mpf": mp.mpf}

        with mp.workdps(self._working_digits):
            try:
                result = eval(processed, {"__builtins__": {}}, namespace)
            except SyntaxError as exc:
                raise EvaluationError("Error de sintaxis") from exc
            except ZeroDivisionError as exc:
                raise EvaluationError("División por cero") from exc
            except (RecursionError, MemoryError) as exc:
                # Cadenas muy largas agotan la pila del compilador
                raise EvaluationError("Expresión demasiado larga") from exc
            except (ArithmeticError, TypeError, ValueError) as exc:
                raise EvaluationError(str(exc) or type(exc).__name__) from exc

        # "()" o similares no producen un número
        if not isinstance(result, (mp.mpf, mp.mpc)):
            raise EvaluationError("Expresión sin valor numérico")
        return result

    def _validate_raw_expression(self, expression: str):
        if not self._ALLOWED_CHARS.fullmatch(expression):
            raise EvaluationError("Expresión contiene caracteres inválidos")
        if "**" in expression or "//" in expression:
            raise EvaluationError("Expresión contiene operadores no permitidos")

    def _preprocess(self, expr: str) -> str:
        expr = expr.strip()
        expr = self._insert_implicit_mult(expr)
        expr = expr.replace("^", "**")
        return self._promote_numeric_literals(expr)

    @staticmethod
    def _insert_implicit_mult(expr: str) -> str:
        patterns = [
            (r"\)\s*\(", ")*("),
            (r"([\d.])\s*\(", r"\1*("),
            (r"\)\s*([\d.])", r")*\1"),
        ]
        for pat, repl in patterns:
            expr = re.sub(pat, repl, expr)
        return expr

    @classmethod
    def _promote_numeric_literals(cls, expr: str) -> str:
        def promote(match):
            literal = match.group(0)
            if literal.endswith("."):
                literal += "0"
            return f'mpf("{literal}")'

        return cls._NUMBER.sub(promote, expr)
