"""
Interfaz gráfica del simulador de errores numéricos.

Usa tkinter. La simulación se ejecuta en un hilo aparte
para no bloquear la interfaz.
"""

import logging
import threading
import tkinter as tk
from tkinter import font as tkfont

from error_simulator import NumericErrorSimulator
from simulation_errors import SimulationError
from simulator_form import (
    INPUT_ERROR_MESSAGE,
    MODE_SEQUENCE,
    MODE_SINGLE,
    replace_decimal_comma,
    run_simulation,
)

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class SimulatorApp:
    """Ventana principal del simulador."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "card":       "#181825",
        "label_fg":   "#BAC2DE",
        "entry_bg":   "#313244",
        "entry_fg":   "#CDD6F4",
        "toggle_on":  "#89B4FA",
        "toggle_off": "#585B70",
        "toggle_fg":  "#1E1E2E",
        "off_fg":     "#CDD6F4",
        "action":     "#A6E3A1",
        "action_fg":  "#1E1E2E",
        "result_fg":  "#A6E3A1",
        "error_fg":   "#F38BA8",
    }

    MODES = [
        (MODE_SINGLE,   "Operación única"),
        (MODE_SEQUENCE, "Sumas sucesivas"),
    ]
    OPERATIONS = ["+", "-", "*", "/"]
    METHODS = ["Truncamiento", "Redondeo"]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Simulador de Errores Numéricos")
        self.root.configure(bg=self.C["bg"])

        self.engine = engine if engine is not None else NumericErrorSimulator()
        self._mode = MODE_SINGLE
        self._operation = self.OPERATIONS[0]
        self._method = self.METHODS[0]

        self._init_fonts()
        self._create_mode_bar()
        self._create_forms()
        self._create_results()
        self._bind_keyboard()
        self._show_mode(MODE_SINGLE)

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_title  = tkfont.Font(family="Segoe UI", size=16, weight="bold")
        self._f_label  = tkfont.Font(family="Segoe UI", size=11)
        self._f_entry  = tkfont.Font(family="Consolas", size=13)
        self._f_btn    = tkfont.Font(family="Segoe UI", size=12)
        self._f_result = tkfont.Font(family="Consolas", size=11)

    # ── Selector de modo ─────────────────────────────────────────

    def _create_mode_bar(self):
        tk.Label(
            self.root, text="Simulador de Errores Numéricos",
            font=self._f_title, bg=self.C["bg"], fg=self.C["entry_fg"],
        ).pack(pady=(10, 6))

        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="x", padx=6, pady=2)
        self._mode_buttons = self._create_choice_row(
            frame, [label for _mode, label in self.MODES],
            lambda idx: self._show_mode(self.MODES[idx][0]),
        )

    def _create_choice_row(self, parent, labels, on_select) -> list[tk.Button]:
        for col in range(len(labels)):
            parent.columnconfigure(col, weight=1, uniform="choice")
        buttons = []
        for col, text in enumerate(labels):
            btn = tk.Button(
                parent, text=text, font=self._f_btn,
                bg=self.C["toggle_off"], fg=self.C["off_fg"],
                activebackground=self.C["toggle_on"], relief="flat",
                command=lambda i=col: on_select(i),
            )
            btn.grid(row=0, column=col, sticky="nsew", padx=2, pady=2, ipady=4)
            buttons.append(btn)
        return buttons

    def _highlight(self, buttons, selected: int):
        for idx, btn in enumerate(buttons):
            if idx == selected:
                btn.config(bg=self.C["toggle_on"], fg=self.C["toggle_fg"])
            else:
                btn.config(bg=self.C["toggle_off"], fg=self.C["off_fg"])

    # ── Formularios ──────────────────────────────────────────────

    def _create_forms(self):
        self._vars = {
            key: tk.StringVar()
            for key in ("x", "y", "number", "total_steps", "digits")
        }

        self._single_frame = tk.Frame(self.root, bg=self.C["card"], padx=12, pady=8)
        self._add_entry(self._single_frame, "Número X:", "x")
        self._add_entry(self._single_frame, "Número Y:", "y")
        self._add_label(self._single_frame, "Operación:")
        row = tk.Frame(self._single_frame, bg=self.C["card"])
        row.pack(fill="x")
        self._operation_buttons = self._create_choice_row(
            row, self.OPERATIONS, self._select_operation,
        )

        self._sequence_frame = tk.Frame(self.root, bg=self.C["card"], padx=12, pady=8)
        self._add_entry(self._sequence_frame, "Número a sumar:", "number")
        self._add_entry(self._sequence_frame, "Total de sumas:", "total_steps")

        # Campos comunes a ambos modos
        self._common_frame = tk.Frame(self.root, bg=self.C["card"], padx=12, pady=8)
        self._add_label(self._common_frame, "Método:")
        row = tk.Frame(self._common_frame, bg=self.C["card"])
        row.pack(fill="x")
        self._method_buttons = self._create_choice_row(
            row, self.METHODS, self._select_method,
        )
        self._add_entry(self._common_frame, "Dígitos significativos:", "digits")

        self._calc_button = tk.Button(
            self.root, text="Calcular", font=self._f_btn,
            bg=self.C["action"], fg=self.C["action_fg"],
            activebackground=self.C["toggle_on"], relief="flat",
            cursor="hand2", command=self._calculate,
        )

        self._highlight(self._operation_buttons, 0)
        self._highlight(self._method_buttons, 0)

    def _add_label(self, parent, text: str):
        tk.Label(
            parent, text=text, font=self._f_label, anchor="w",
            bg=self.C["card"], fg=self.C["label_fg"],
        ).pack(fill="x", pady=(6, 0))

    def _add_entry(self, parent, label: str, key: str):
        self._add_label(parent, label)
        entry = tk.Entry(
            parent, textvariable=self._vars[key], font=self._f_entry,
            bg=self.C["entry_bg"], fg=self.C["entry_fg"],
            insertbackground=self.C["entry_fg"], relief="flat", bd=4,
        )
        entry.pack(fill="x")
        entry.bind("<Return>", lambda _e: self._calculate())
        entry.bind("<KP_Enter>", lambda _e: self._calculate())
        if key in ("x", "y", "number"):
            entry.bind("<KeyRelease>", lambda _e, k=key: self._replace_comma(k))

    def _replace_comma(self, key: str):
        var = self._vars[key]
        text = var.get()
        if "," in text:
            var.set(replace_decimal_comma(text))

    # ── Resultados ───────────────────────────────────────────────

    def _create_results(self):
        self._result_frame = tk.Frame(self.root, bg=self.C["card"], padx=12, pady=8)
        scrollbar = tk.Scrollbar(self._result_frame)
        scrollbar.pack(side="right", fill="y")
        self._result_text = tk.Text(
            self._result_frame, height=16, wrap="none", font=self._f_result,
            bg=self.C["card"], fg=self.C["result_fg"], relief="flat",
            yscrollcommand=scrollbar.set, state="disabled",
        )
        self._result_text.pack(fill="both", expand=True)
        scrollbar.config(command=self._result_text.yview)

    def _set_result(self, lines: list[str], error: bool = False):
        self._result_text.config(state="normal")
        self._result_text.delete("1.0", tk.END)
        self._result_text.insert("1.0", "\n".join(lines))
        self._result_text.config(
            state="disabled",
            fg=self.C["error_fg"] if error else self.C["result_fg"],
        )

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Escape>", lambda _e: self._clear())

    # ── Acciones ─────────────────────────────────────────────────

    def _show_mode(self, mode: str):
        self._mode = mode
        for frame in (self._single_frame, self._sequence_frame,
                      self._common_frame, self._calc_button, self._result_frame):
            frame.pack_forget()

        form = self._single_frame if mode == MODE_SINGLE else self._sequence_frame
        form.pack(fill="x", padx=6, pady=(6, 0))
        self._common_frame.pack(fill="x", padx=6)
        self._calc_button.pack(fill="x", padx=8, pady=8, ipady=6)
        self._result_frame.pack(fill="both", expand=True, padx=6, pady=(0, 6))

        selected = [m for m, _label in self.MODES].index(mode)
        self._highlight(self._mode_buttons, selected)
        # Al cambiar de modo se descarta el resultado anterior
        self._set_result([])

    def _select_operation(self, idx: int):
        self._operation = self.OPERATIONS[idx]
        self._highlight(self._operation_buttons, idx)

    def _select_method(self, idx: int):
        self._method = self.METHODS[idx]
        self._highlight(self._method_buttons, idx)

    def _clear(self):
        for var in self._vars.values():
            var.set("")
        self._set_result([])

    # ── Cálculo en hilo separado ─────────────────────────────────

    def _calculate(self):
        mode = self._mode
        fields = {key: var.get() for key, var in self._vars.items()}
        fields["operation"] = self._operation
        fields["method"] = self._method

        def _run():
            try:
                lines = run_simulation(self.engine, mode, fields)
                self.root.after(0, lambda: self._set_result(lines))
            except SimulationError as exc:
                logger.info("Entrada rechazada: %s", exc)
                self.root.after(0, lambda: self._set_result(
                    ["Error", INPUT_ERROR_MESSAGE], error=True))
            except (ValueError, ArithmeticError, TypeError) as exc:
                logger.exception("Fallo inesperado en la simulación")
                msg = str(exc) if str(exc) else type(exc).__name__
                self.root.after(0, lambda: self._set_result(
                    [f"Error: {msg}"], error=True))

        thread = threading.Thread(target=_run, daemon=True)
        thread.start()
