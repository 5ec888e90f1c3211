"""Operaciones binarias exactas sobre valores decimales."""

from __future__ import annotations

from decimal import Context, Decimal
from enum import Enum

from decimal_value import INFINITY, working_context


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def coerce(cls, operation) -> "Operation":
        """Acepta el enum, el símbolo ASCII o el glifo del teclado."""
        if isinstance(operation, cls):
            return operation
        if isinstance(operation, str):
            symbol = _GLYPHS.get(operation.strip(), operation.strip())
            for member in cls:
                if member.value == symbol:
                    return member
        raise ValueError(f"Operación desconocida: {operation!r}")


_GLYPHS = {"×": "*", "÷": "/", "−": "-"}


def apply(operation, x: Decimal, y: Decimal, context: Context | None = None) -> Decimal:
    """Aplica ``operation`` a ``x`` e ``y`` con la precisión de trabajo.

    Dividir por cero exacto devuelve ``INFINITY`` en lugar de fallar.
    """
    operation = Operation.coerce(operation)
    ctx = context if context is not None else working_context()

    if operation is Operation.ADD:
        return ctx.add(x, y)
    if operation is Operation.SUBTRACT:
        return ctx.subtract(x, y)
    if operation is Operation.MULTIPLY:
        return ctx.multiply(x, y)
    if y.is_zero():
        return INFINITY
    return ctx.divide(x, y)
