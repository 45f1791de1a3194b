"""Punto de entrada de la calculadora."""

import logging
import tkinter as tk

import config
from calculator_controller import CalculatorController
from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp


def _setup_logging():
    level = getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def main():
    _setup_logging()
    root = tk.Tk()
    root.geometry(config.WINDOW_GEOMETRY)
    root.minsize(*config.WINDOW_MIN_SIZE)
    controller = CalculatorController(engine=CalculatorEngine())
    CalculatorApp(root, controller=controller)
    root.mainloop()


if __name__ == "__main__":
    main()
