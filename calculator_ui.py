"""
Interfaz gráfica de la calculadora.

Usa tkinter. La vista no contiene lógica: cada botón llama al controlador y
la pantalla se redibuja a partir del ``ExpressionState`` resultante.
"""

import tkinter as tk
from tkinter import font as tkfont

import config
from calculator_controller import CalculatorController, ExpressionState


class CalculatorApp:
    """Ventana principal de la calculadora."""

    C = config.PALETTE

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, tipo_color)
    #  tipo_color: "num", "op", "special", "equals"

    KEYPAD = [
        [("C", "special"), ("DEL", "special"),
         ("(", "op"), (")", "op")],

        [("7", "num"), ("8", "num"), ("9", "num"), ("÷", "op")],

        [("4", "num"), ("5", "num"), ("6", "num"), ("×", "op")],

        [("1", "num"), ("2", "num"), ("3", "num"), ("−", "op")],

        [("0", "num"), (".", "num"), ("=", "equals"), ("+", "op")],
    ]

    def __init__(self, root: tk.Tk, controller: CalculatorController | None = None):
        self.root = root
        self.root.title(config.APP_TITLE)
        self.root.configure(bg=self.C["bg"])

        self.controller = controller if controller is not None else CalculatorController()

        self._init_fonts()
        self._create_display()
        self._create_keypad()

        self.controller.subscribe(self.render)

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_expr   = tkfont.Font(family=config.EXPR_FONT[0], size=config.EXPR_FONT[1])
        self._f_result = tkfont.Font(family=config.RESULT_FONT[0],
                                     size=config.RESULT_FONT[1], weight="bold")
        self._f_btn    = tkfont.Font(family=config.BUTTON_FONT[0], size=config.BUTTON_FONT[1])

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        # Expresión (solo lectura: se edita con los botones)
        self.expr_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.expr_var, anchor="e",
            font=self._f_expr, bg=self.C["display_bg"], fg=self.C["expr_fg"],
        ).pack(fill="x", pady=(4, 0))

        self.result_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.result_var, anchor="e",
            font=self._f_result, bg=self.C["display_bg"], fg=self.C["result_fg"],
        ).pack(fill="x", pady=(2, 4))

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda k=text: self._on_key(k),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        spans[-1] += extra
        return spans

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, key: str):
        self.controller.press(key)

    def render(self, state: ExpressionState):
        self.expr_var.set(state.text)
        self.result_var.set(state.result)
