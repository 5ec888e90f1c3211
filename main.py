"""Punto de entrada del simulador de errores numéricos."""

import logging
import tkinter as tk

from error_simulator import NumericErrorSimulator
from simulator_ui import SimulatorApp


WORKING_PRECISION = 50
LOG_LEVEL = logging.WARNING
WINDOW_GEOMETRY = "480x760"


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(420, 640)
    engine = NumericErrorSimulator(working_precision=WORKING_PRECISION)
    SimulatorApp(root, engine=engine)
    root.mainloop()


if __name__ == "__main__":
    main()
