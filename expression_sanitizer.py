"""Normalización de la expresión de la pantalla antes de evaluarla."""

# Glifos de la pantalla → operadores ASCII del evaluador
_GLYPHS = {
    "×": "*",   # ×
    "÷": "/",   # ÷
    "−": "-",   # − (signo menos unicode)
    "–": "-",   # – (guion medio)
}

TRAILING_OPERATORS = frozenset("+-*/^.")


class InvalidExpression(ValueError):
    """La expresión queda vacía una vez limpia."""


def normalize_glyphs(raw: str) -> str:
    for glyph, ascii_op in _GLYPHS.items():
        raw = raw.replace(glyph, ascii_op)
    return raw


def strip_trailing_operators(expr: str) -> str:
    """Quita operadores colgantes: "2+3+" → "2+3". Nunca quita ')'."""
    end = len(expr)
    while end > 0 and expr[end - 1] in TRAILING_OPERATORS:
        end -= 1
    return expr[:end]


def sanitize(raw: str) -> str:
    """Convierte el texto de la pantalla en una expresión ASCII evaluable.

    Raises:
        InvalidExpression: texto vacío o que queda vacío tras limpiar.
    """
    if not raw or not raw.strip():
        raise InvalidExpression("Expresión vacía")

    expr = strip_trailing_operators(normalize_glyphs(raw))

    if not expr.strip():
        raise InvalidExpression("Expresión inválida")

    return expr
