"""Valores decimales de precisión arbitraria para el simulador.

Todos los cálculos usan ``decimal.Decimal`` dentro de un contexto
explícito: no se modifica la precisión global del proceso.
"""

from __future__ import annotations

import re
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Context, Decimal, InvalidOperation

from simulation_errors import ParseError


WORKING_PRECISION = 50
GUARD_DIGITS = 10

INFINITY = Decimal("Infinity")
ZERO = Decimal(0)

_DECIMAL_RE = re.compile(
    r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$"
)


def working_context(precision: int = WORKING_PRECISION) -> Context:
    """Crea un contexto nuevo con ``precision`` dígitos significativos.

    Las trampas quedan desactivadas: Infinity - Infinity da NaN y una
    división por cero da Infinity, sin lanzar excepciones.
    """
    if precision < 1:
        raise ValueError("La precisión debe ser al menos 1")
    return Context(
        prec=precision,
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[],
    )


def parse_decimal(text: str) -> Decimal:
    """Convierte un literal decimal en ``Decimal`` sin redondearlo.

    Raises:
        ParseError: el texto no es un literal decimal (incluye NaN,
            Infinity, comas decimales sin normalizar y exponentes
            fuera de rango).
    """
    if not isinstance(text, str):
        raise ParseError(text)
    cleaned = text.strip()
    if not _DECIMAL_RE.fullmatch(cleaned):
        raise ParseError(text)
    try:
        return Decimal(cleaned)
    except InvalidOperation as exc:
        # Exponente fuera del rango que admite decimal.
        raise ParseError(text) from exc


def leading_exponent(value: Decimal) -> int:
    """Potencia de diez del dígito más significativo (0 para cero)."""
    if not value.is_finite():
        raise ValueError("Un valor no finito no tiene exponente")
    if value.is_zero():
        return 0
    return value.adjusted()


def exact_context_for(*values: Decimal) -> Context:
    """Contexto con precisión suficiente para multiplicar ``values`` sin redondeo."""
    digits = sum(len(v.as_tuple().digits) for v in values if v.is_finite())
    return working_context(max(WORKING_PRECISION, digits + 1))
