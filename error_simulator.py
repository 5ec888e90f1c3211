"""Motor de simulación de errores por aritmética de dígitos limitados.

Contrato de interfaz:
    - simulate_one(x_text, y_text, operation, digits, method)
    - simulate_sequence(number_text, total_steps, digits, method)

Ambos devuelven un resultado inmutable con los valores exacto y
aproximado y los errores absoluto y relativo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from decimal_value import (
    WORKING_PRECISION,
    ZERO,
    exact_context_for,
    parse_decimal,
    working_context,
)
from digit_limiter import LimitMethod, limit
from operation_registry import Operation, apply
from simulation_errors import InvalidDigitCount, InvalidStepCount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SingleOperationResult:
    operation: Operation
    digits: int
    method: LimitMethod
    x_approx: Decimal
    y_approx: Decimal
    exact_value: Decimal
    approximate_value: Decimal
    absolute_error: Decimal
    relative_error: Decimal


@dataclass(frozen=True)
class SequentialSumResult:
    total_steps: int
    digits: int
    method: LimitMethod
    exact_final: Decimal
    approximate_final: Decimal
    absolute_error: Decimal
    relative_error: Decimal
    steps: tuple[Decimal, ...]
    adjusted_addend: Decimal


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class NumericErrorSimulator:
    """Compara cálculos exactos con cálculos limitados a ``n`` dígitos."""

    def __init__(self, working_precision: int = WORKING_PRECISION):
        if not _is_positive_int(working_precision):
            raise ValueError("La precisión de trabajo debe ser un entero positivo")
        self._working_precision = working_precision

    @property
    def working_precision(self) -> int:
        return self._working_precision

    # ── Operación única ──────────────────────────────────────────

    def simulate_one(self, x_text: str, y_text: str, operation, digits: int,
                     method) -> SingleOperationResult:
        """Calcula ``x op y`` exacto y limitado a ``digits`` dígitos.

        Raises:
            InvalidDigitCount: ``digits`` no es un entero positivo.
            ParseError: ``x_text`` o ``y_text`` no son literales decimales.
        """
        self._check_digits(digits)
        operation = Operation.coerce(operation)
        method = LimitMethod.coerce(method)
        x = parse_decimal(x_text)
        y = parse_decimal(y_text)

        ctx = working_context(self._working_precision)
        exact_value = apply(operation, x, y, ctx)

        x_approx = self._limit(x, digits, method)
        y_approx = self._limit(y, digits, method)
        partial = apply(operation, x_approx, y_approx, ctx)
        approximate_value = self._limit(partial, digits, method)

        absolute_error, relative_error = self._errors(exact_value, approximate_value)
        logger.debug(
            "simulate_one %s %s %s (%d dígitos, %s): exacto=%s aproximado=%s",
            x_text, operation.value, y_text, digits, method.value,
            exact_value, approximate_value,
        )
        return SingleOperationResult(
            operation=operation,
            digits=digits,
            method=method,
            x_approx=x_approx,
            y_approx=y_approx,
            exact_value=exact_value,
            approximate_value=approximate_value,
            absolute_error=absolute_error,
            relative_error=relative_error,
        )

    # ── Sumas sucesivas ──────────────────────────────────────────

    def simulate_sequence(self, number_text: str, total_steps: int, digits: int,
                          method) -> SequentialSumResult:
        """Suma ``number_text`` ``total_steps`` veces limitando cada total parcial.

        Raises:
            InvalidDigitCount: ``digits`` no es un entero positivo.
            InvalidStepCount: ``total_steps`` no es un entero positivo.
            ParseError: ``number_text`` no es un literal decimal.
        """
        self._check_digits(digits)
        if not _is_positive_int(total_steps):
            raise InvalidStepCount(total_steps)
        method = LimitMethod.coerce(method)
        addend = parse_decimal(number_text)

        count = Decimal(total_steps)
        exact_final = exact_context_for(addend, count).multiply(addend, count)

        ctx = working_context(self._working_precision)
        accumulator = ZERO
        steps = []
        for _ in range(total_steps):
            accumulator = self._limit(ctx.add(accumulator, addend), digits, method)
            steps.append(accumulator)

        approximate_final = accumulator
        absolute_error, relative_error = self._errors(exact_final, approximate_final)
        logger.debug(
            "simulate_sequence %s x%d (%d dígitos, %s): exacto=%s aproximado=%s",
            number_text, total_steps, digits, method.value,
            exact_final, approximate_final,
        )
        return SequentialSumResult(
            total_steps=total_steps,
            digits=digits,
            method=method,
            exact_final=exact_final,
            approximate_final=approximate_final,
            absolute_error=absolute_error,
            relative_error=relative_error,
            steps=tuple(steps),
            adjusted_addend=self._limit(addend, digits, method),
        )

    # ── Auxiliares ───────────────────────────────────────────────

    @staticmethod
    def _check_digits(digits):
        if not _is_positive_int(digits):
            raise InvalidDigitCount(digits)

    def _limit(self, value: Decimal, digits: int, method: LimitMethod) -> Decimal:
        return limit(value, digits, method, precision=self._working_precision)

    def _errors(self, exact: Decimal, approximate: Decimal) -> tuple[Decimal, Decimal]:
        ctx = working_context(self._working_precision)
        absolute_error = ctx.abs(ctx.subtract(exact, approximate))
        if exact.is_zero():
            return absolute_error, ZERO
        # El error relativo se mide contra el valor aproximado obtenido.
        relative_error = ctx.divide(absolute_error, ctx.abs(approximate))
        return absolute_error, relative_error


_default_simulator = NumericErrorSimulator()


def simulate_one(x_text: str, y_text: str, operation, digits: int,
                 method) -> SingleOperationResult:
    return _default_simulator.simulate_one(x_text, y_text, operation, digits, method)


def simulate_sequence(number_text: str, total_steps: int, digits: int,
                      method) -> SequentialSumResult:
    return _default_simulator.simulate_sequence(number_text, total_steps, digits, method)
