import argparse
from decimal import Decimal

from digit_limiter import LimitMethod, limit, round_half_up, truncate
from error_simulator import NumericErrorSimulator
from operation_registry import Operation, apply
from scientific_formatter import (
	format_decimal,
	format_percent,
	format_scientific,
	render_sequence_report,
)


def _step_texts(number: str, *, steps: int, digits: int, method: str) -> str:
	result = NumericErrorSimulator().simulate_sequence(number, steps, digits, method)
	return " ".join(format_decimal(step) for step in result.steps)


def inspect_sequence(
	number: str,
	*,
	steps: int = 10,
	digits: int = 3,
	method: str = "redondeo",
) -> None:
	"""Imprime el informe completo de una simulación de sumas sucesivas."""
	result = NumericErrorSimulator().simulate_sequence(number, steps, digits, method)

	print(f"Suma sucesiva de {number} ({steps} pasos, {digits} dígitos, {result.method.value})")
	for line in render_sequence_report(result):
		print(f"  {line}")


def _collect_results(engine: NumericErrorSimulator) -> list[tuple[str, str, str]]:
	"""Casos de regresión como (descripción, esperado, obtenido), en texto."""
	one_third = engine.simulate_one("1", "3", "/", 3, "Truncamento")
	tenth = engine.simulate_sequence("0.1", 10, 1, "Arredondamento")
	stalled = engine.simulate_sequence("0.15", 10, 1, "redondeo")
	infinite = apply(Operation.DIVIDE, Decimal("5"), Decimal("0"))

	return [
		("1/3 adjusted operands", "1 3",
		 f"{format_decimal(one_third.x_approx)} {format_decimal(one_third.y_approx)}"),
		("1/3 approximate value", "0.333", format_decimal(one_third.approximate_value)),
		("1/3 exact value keeps 50 digits", "0." + "3" * 50,
		 format_decimal(one_third.exact_value)),
		("1/3 relative error against the approximate value", "0.1001%",
		 format_percent(one_third.relative_error)),
		("0.1 summed 10 times: exact final", "1", format_decimal(tenth.exact_final)),
		("0.1 summed 10 times: step count", "10", str(len(tenth.steps))),
		("0.15 rounded to 1 digit stalls once the total reaches 1",
		 "0.2 0.4 0.6 0.8 1 1 1 1 1 1",
		 _step_texts("0.15", steps=10, digits=1, method="redondeo")),
		("0.15 truncated to 1 digit drops every half step",
		 "0.1 0.2 0.3 0.4 0.5 0.6 0.7 0.8 0.9 1",
		 _step_texts("0.15", steps=10, digits=1, method="truncamiento")),
		("0.15 stalled sum relative error", "50.0000%",
		 format_percent(stalled.relative_error)),
		("division by zero yields the infinite sentinel", "Infinity",
		 format_decimal(infinite)),
		("limiting the infinite sentinel keeps it infinite", "Infinity",
		 format_decimal(limit(infinite, 3, LimitMethod.ROUNDING))),
		("zero formats as plain 0", "0", format_scientific(Decimal(0), 7)),
		("scientific notation of 0.333 with 3 digits", "3.33E-1",
		 format_scientific(Decimal("0.333"), 3)),
		("truncation above the decimal point", "123000000",
		 format_decimal(truncate(Decimal("123456789"), 3))),
		("half-up rounding of a negative tie moves away from zero", "-3",
		 format_decimal(round_half_up(Decimal("-2.5"), 1))),
	]


def run_regressions() -> int:
	"""Ejecuta los casos y devuelve la cantidad de fallos."""
	results = _collect_results(NumericErrorSimulator())
	width = max(len(label) for label, _expected, _actual in results)

	failures = 0
	for label, expected, actual in results:
		if expected == actual:
			print(f"[ OK ] {label}")
			continue
		failures += 1
		print(f"[FAIL] {label.ljust(width)}")
		print(f"       esperado: {expected}")
		print(f"       obtenido: {actual}")

	print(f"\n{len(results) - failures}/{len(results)} casos correctos.")
	return failures


def _build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		description="Casos de regresión del simulador de errores numéricos.",
	)
	parser.add_argument(
		"--inspect", metavar="NUMERO",
		help="muestra el informe de sumas sucesivas de NUMERO en lugar de los casos",
	)
	parser.add_argument("--steps", type=int, default=10)
	parser.add_argument("--digits", type=int, default=3)
	parser.add_argument("--method", default="redondeo")
	return parser


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_simulation_checks.py
	#   python regression_simulation_checks.py --inspect 0.15 --steps 20 --digits 2 --method truncamiento
	args = _build_parser().parse_args()
	if args.inspect is not None:
		inspect_sequence(
			args.inspect,
			steps=args.steps,
			digits=args.digits,
			method=args.method,
		)
	else:
		raise SystemExit(1 if run_regressions() else 0)
