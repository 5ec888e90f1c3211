"""Formato de texto de los resultados del simulador."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from decimal_value import GUARD_DIGITS, WORKING_PRECISION, working_context

DEFAULT_SCIENTIFIC_FRACTION_DIGITS = 4
PERCENT_PLACES = 4

# Umbrales de exponente a partir de los cuales el texto completo pasa a
# notación exponencial.
PLAIN_EXP_NEG = -7
PLAIN_EXP_POS = 21


def _non_finite_text(value: Decimal) -> str:
    if value.is_nan():
        return "NaN"
    return "-Infinity" if value.is_signed() else "Infinity"


def format_scientific(value: Decimal | None, digits: int | None = None) -> str:
    """Devuelve ``value`` como ``d.ddd…E±x``.

    Con ``digits`` positivo se muestran ``digits - 1`` decimales en la
    mantisa; en otro caso, cuatro.
    """
    if value is None:
        return "0"
    value = Decimal(value)
    if value.is_zero():
        return "0"
    if not value.is_finite():
        return _non_finite_text(value)

    if isinstance(digits, int) and not isinstance(digits, bool) and digits > 0:
        fraction_digits = digits - 1
    else:
        fraction_digits = DEFAULT_SCIENTIFIC_FRACTION_DIGITS

    # La mantisa se redondea a fraction_digits + 1 dígitos, mitad hacia arriba.
    rounded = working_context(fraction_digits + 1).plus(value)
    return format(rounded, f".{fraction_digits}E")


def format_decimal(value: Decimal) -> str:
    """Texto completo de ``value`` sin ceros sobrantes.

    Usa notación posicional salvo que el dígito principal quede en un
    exponente ``>= 21`` o ``<= -7``; ahí usa ``1.5e+21``.
    """
    if not value.is_finite():
        return _non_finite_text(value)
    if value.is_zero():
        return "0"

    sign, digit_tuple, exponent = value.as_tuple()
    coefficient = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(coefficient)
    leading = value.adjusted()
    prefix = "-" if sign else ""

    if leading <= PLAIN_EXP_NEG or leading >= PLAIN_EXP_POS:
        mantissa = coefficient[0]
        if len(coefficient) > 1:
            mantissa += "." + coefficient[1:]
        exp_sign = "+" if leading >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(leading)}"

    if exponent >= 0:
        return prefix + coefficient + "0" * exponent

    point = len(coefficient) + exponent
    if point > 0:
        return f"{prefix}{coefficient[:point]}.{coefficient[point:]}"
    return f"{prefix}0.{'0' * -point}{coefficient}"


def format_percent(value: Decimal, places: int = PERCENT_PLACES) -> str:
    """Fracción ``value`` expresada en porcentaje con ``places`` decimales."""
    if not value.is_finite():
        return _non_finite_text(value) + "%"
    ctx = working_context(
        max(WORKING_PRECISION, value.adjusted() + 3 + places + GUARD_DIGITS)
    )
    scaled = ctx.multiply(value, 100).quantize(
        Decimal((0, (1,), -places)), rounding=ROUND_HALF_UP, context=ctx,
    )
    return format(scaled, f".{places}f") + "%"


# ── Informes ─────────────────────────────────────────────────────

def render_single_report(result) -> list[str]:
    """Líneas que muestra la UI para una operación única."""
    digits = result.digits
    return [
        "--- Resultados de la operación única ---",
        f"Valor exacto: {format_decimal(result.exact_value)}",
        f"Valor aproximado: {format_decimal(result.approximate_value)}",
        f"(Notación científica: {format_scientific(result.approximate_value, digits)})",
        f"Error absoluto: {format_decimal(result.absolute_error)}",
        f"(Notación científica: {format_scientific(result.absolute_error, digits)})",
        f"Error relativo: {format_percent(result.relative_error)}",
        "",
        "Valores ajustados:",
        f"X ajustado: {format_decimal(result.x_approx)}",
        f"Y ajustado: {format_decimal(result.y_approx)}",
    ]


def render_sequence_report(result) -> list[str]:
    """Líneas que muestra la UI para las sumas sucesivas."""
    digits = result.digits
    lines = [
        "--- Resultados de las sumas sucesivas ---",
        f"Valor exacto final: {format_decimal(result.exact_final)}",
        f"Valor aproximado final: {format_decimal(result.approximate_final)}",
        f"(Notación científica: {format_scientific(result.approximate_final, digits)})",
        f"Error absoluto final: {format_decimal(result.absolute_error)}",
        f"(Notación científica: {format_scientific(result.absolute_error, digits)})",
        f"Error relativo final: {format_percent(result.relative_error)}",
        "",
        "Pasos de la suma:",
    ]
    for index, step in enumerate(result.steps, start=1):
        lines.append(
            f"Suma {index}: {format_decimal(step)} "
            f"(Notación científica: {format_scientific(step, digits)})"
        )
    lines.append("")
    lines.append(f"Número ajustado en cada suma: {format_decimal(result.adjusted_addend)}")
    return lines
