"""
Configuración de la calculadora.
"""
import os
import sys

# ── Aplicación ───────────────────────────────────────────────────
APP_TITLE = "Calculadora"
WINDOW_GEOMETRY = "360x520"
WINDOW_MIN_SIZE = (320, 480)

# Nivel de log (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.getenv("CALC_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# ── Cálculo ──────────────────────────────────────────────────────
# Marcador genérico para cualquier fallo (sintaxis, división por cero...)
ERROR_MARKER = "Error"

# Decimales mostrados en el resultado (redondeo HALF_UP)
FRACTION_DIGITS = 10

# Precisión de trabajo del evaluador (dígitos decimales de mpmath)
WORKING_DIGITS = 40

# Más allá de este valor un double desborda a infinito
MAX_MAGNITUDE = sys.float_info.max

# ── Fuentes ──────────────────────────────────────────────────────
EXPR_FONT = ("Consolas", 18)
RESULT_FONT = ("Consolas", 26, "bold")
BUTTON_FONT = ("Segoe UI", 15)

# ── Paleta ───────────────────────────────────────────────────────
PALETTE = {
    "bg":         "#1E1E2E",
    "display_bg": "#181825",
    "num":        "#313244",
    "num_fg":     "#CDD6F4",
    "op":         "#F38BA8",
    "op_fg":      "#1E1E2E",
    "special":    "#585B70",
    "special_fg": "#CDD6F4",
    "equals":     "#89B4FA",
    "equals_fg":  "#1E1E2E",
    "expr_fg":    "#BAC2DE",
    "result_fg":  "#A6E3A1",
}
