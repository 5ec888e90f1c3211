"""Reducción de un valor decimal a ``n`` dígitos significativos."""

from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal
from enum import Enum

from decimal_value import (
    GUARD_DIGITS,
    WORKING_PRECISION,
    ZERO,
    leading_exponent,
    working_context,
)
from simulation_errors import InvalidDigitCount


class LimitMethod(Enum):
    """Política aplicada al descartar dígitos."""

    TRUNCATION = "truncamiento"
    ROUNDING = "redondeo"

    @property
    def rounding(self) -> str:
        return _ROUNDING_MODES[self]

    @classmethod
    def coerce(cls, method) -> "LimitMethod":
        """Acepta el enum o una etiqueta de UI (es, pt, en)."""
        if isinstance(method, cls):
            return method
        if isinstance(method, str):
            found = _LABELS.get(method.strip().lower())
            if found is not None:
                return found
        raise ValueError(f"Método desconocido: {method!r}")


_ROUNDING_MODES = {
    LimitMethod.TRUNCATION: ROUND_DOWN,
    LimitMethod.ROUNDING: ROUND_HALF_UP,
}

_LABELS = {
    "truncamiento": LimitMethod.TRUNCATION,
    "truncamento": LimitMethod.TRUNCATION,
    "truncation": LimitMethod.TRUNCATION,
    "redondeo": LimitMethod.ROUNDING,
    "arredondamento": LimitMethod.ROUNDING,
    "rounding": LimitMethod.ROUNDING,
}


def limit(
    value: Decimal,
    digits: int,
    method,
    precision: int = WORKING_PRECISION,
) -> Decimal:
    """Conserva ``digits`` dígitos significativos de ``value``.

    El cero devuelve cero exacto y los valores no finitos (el centinela
    de la división por cero) se devuelven sin cambios. Para el resto se
    cuantiza en la posición ``digits - e - 1`` tras el punto decimal,
    donde ``e`` es el exponente del dígito principal; la posición puede
    ser negativa y entonces el corte cae a la izquierda del punto.
    """
    if isinstance(digits, bool) or not isinstance(digits, int) or digits <= 0:
        raise InvalidDigitCount(digits)
    method = LimitMethod.coerce(method)
    if value.is_zero():
        return ZERO
    if not value.is_finite():
        return value

    places = digits - leading_exponent(value) - 1
    quantum = Decimal((0, (1,), -places))
    # Un redondeo hacia arriba puede sumar un dígito (9.99 -> 10.0).
    context = working_context(max(precision, digits + GUARD_DIGITS))
    return value.quantize(quantum, rounding=method.rounding, context=context)


def truncate(value: Decimal, digits: int) -> Decimal:
    """Descarta los dígitos sobrantes, hacia cero."""
    return limit(value, digits, LimitMethod.TRUNCATION)


def round_half_up(value: Decimal, digits: int) -> Decimal:
    """Redondea al dígito ``digits``; la mitad se aleja del cero."""
    return limit(value, digits, LimitMethod.ROUNDING)
