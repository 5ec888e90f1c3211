"""Errores del simulador de errores numéricos."""


class SimulationError(ValueError):
    """Error base: la entrada de una simulación no es válida."""


class ParseError(SimulationError):
    """El texto recibido no es un literal decimal válido."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Número inválido: {text!r}")


class InvalidDigitCount(SimulationError):
    """La cantidad de dígitos significativos no es un entero positivo."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Cantidad de dígitos inválida: {value!r}")


class InvalidStepCount(SimulationError):
    """La cantidad de sumas no es un entero positivo."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Cantidad de sumas inválida: {value!r}")
