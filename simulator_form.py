"""Lectura del formulario del simulador y despacho al motor.

La UI entrega los textos tal como los escribió el usuario; aquí se
normaliza la coma decimal, se validan las cantidades y se devuelven las
líneas del informe.
"""

from __future__ import annotations

import logging

from error_simulator import NumericErrorSimulator
from scientific_formatter import render_sequence_report, render_single_report
from simulation_errors import InvalidDigitCount, InvalidStepCount

logger = logging.getLogger(__name__)

MODE_SINGLE = "single"
MODE_SEQUENCE = "sequence"

INPUT_ERROR_MESSAGE = (
    "Verifica los números ingresados. Usa punto (.) como separador decimal."
)


def replace_decimal_comma(text: str) -> str:
    """Cambia la coma decimal por punto sin tocar el resto del texto."""
    return (text or "").replace(",", ".")


def normalize_decimal_text(text: str) -> str:
    return replace_decimal_comma(text).strip()


def parse_positive_int(text: str, error_cls=InvalidDigitCount) -> int:
    """Entero positivo escrito en ``text``; si no lo es, lanza ``error_cls``."""
    cleaned = (text or "").strip()
    if not (cleaned.isascii() and cleaned.isdigit()):
        raise error_cls(text)
    value = int(cleaned)
    if value <= 0:
        raise error_cls(text)
    return value


def run_simulation(engine: NumericErrorSimulator, mode: str, fields: dict) -> list[str]:
    """Ejecuta la simulación del modo indicado con los campos del formulario.

    ``fields`` usa las claves ``x``, ``y``, ``operation``, ``number``,
    ``total_steps``, ``digits`` y ``method``; solo se leen las del modo.

    Raises:
        SimulationError: algún campo numérico es inválido.
        ValueError: modo, operación o método desconocidos.
    """
    digits = parse_positive_int(fields.get("digits"), InvalidDigitCount)
    method = fields.get("method")

    if mode == MODE_SINGLE:
        result = engine.simulate_one(
            normalize_decimal_text(fields.get("x")),
            normalize_decimal_text(fields.get("y")),
            fields.get("operation"),
            digits,
            method,
        )
        return render_single_report(result)

    if mode == MODE_SEQUENCE:
        total_steps = parse_positive_int(fields.get("total_steps"), InvalidStepCount)
        result = engine.simulate_sequence(
            normalize_decimal_text(fields.get("number")),
            total_steps,
            digits,
            method,
        )
        return render_sequence_report(result)

    raise ValueError(f"Modo desconocido: {mode!r}")
