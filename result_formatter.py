"""Formato del resultado numérico para la pantalla."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from mpmath import mp

import config

# Dígitos significativos leídos de un mpf antes de redondear
_MPF_DIGITS = config.WORKING_DIGITS


def _to_decimal(value):
    """Convierte el valor a Decimal, o None si no es un real finito."""
    if isinstance(value, (complex, mp.mpc)):
        return None

    if isinstance(value, mp.mpf):
        if not mp.isfinite(value):
            return None
        return Decimal(mp.nstr(value, n=_MPF_DIGITS))

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        # repr da la representación decimal más corta del double
        return Decimal(repr(value))

    if isinstance(value, Decimal):
        return value if value.is_finite() else None

    if isinstance(value, int):
        return Decimal(value)

    return None


def format_number(value, fraction_digits: int = config.FRACTION_DIGITS) -> str:
    """Redondea a ``fraction_digits`` decimales (HALF_UP) sin ceros finales.

    Nunca usa notación científica. NaN, infinito, complejos y valores fuera
    del rango de un double devuelven el marcador de error.
    """
    number = _to_decimal(value)
    if number is None:
        return config.ERROR_MARKER

    with localcontext() as ctx:
        if abs(number) > Decimal(config.MAX_MAGNITUDE):
            return config.ERROR_MARKER

        ctx.prec = max(ctx.prec, number.adjusted() + fraction_digits + 2)
        quantum = Decimal(1).scaleb(-fraction_digits)
        rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)

        if rounded.is_zero():
            return "0"

        return format(rounded.normalize(), "f")
