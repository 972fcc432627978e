"""Keypad logic and a Tk window for the calculator."""

from __future__ import annotations

from typing import Callable

from calcpad.calculator import Calculator, Operator

DIGITS = "0123456789"
DECIMAL_POINT = "."
EQUALS = "="
CLEAR = "C"

# (row, column) of every key on the keypad grid.
KEY_POSITIONS: dict[str, tuple[int, int]] = {
    **{
        str(i): ((4, 1) if i == 0 else (3 - i // 3, i % 3))
        for i in range(10)
    },
    "+": (1, 3),
    "-": (2, 3),
    "*": (3, 3),
    "/": (4, 3),
    "%": (0, 0),
    "^": (0, 2),
    CLEAR: (0, 1),
    DECIMAL_POINT: (4, 0),
    EQUALS: (4, 2),
}


def format_number(value: float) -> str:
    """Render a result with six significant digits, shortest form."""
    return f"{value:.6g}"


def _input_value(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


class KeypadController:
    """Turns key presses into calculator actions and tracks the display text.

    ``on_error`` receives the message of an arithmetic error; when it is
    None the error propagates instead.
    """

    def __init__(
        self,
        calculator: Calculator | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self.calculator = calculator if calculator is not None else Calculator()
        self.on_error = on_error
        self.display = ""

    def press(self, key: str) -> str:
        """Handle one key and return the new display text."""
        calc = self.calculator
        if len(key) == 1 and key in DIGITS:
            calc.enter_digit(int(key))
            self.display = calc.current_input
        elif key == DECIMAL_POINT:
            calc.enter_decimal_point()
            self.display = calc.current_input
        elif key == EQUALS:
            self._calculate()
        elif key == CLEAR:
            calc.clear()
            self.display = ""
        else:
            try:
                op = Operator(key)
            except ValueError:
                raise ValueError(f"unknown key: {key!r}") from None
            calc.choose_operator(op)
            self.display = calc.current_input
        return self.display

    def _calculate(self) -> None:
        calc = self.calculator
        calc.second_operand = _input_value(calc.current_input)
        try:
            self.display = format_number(calc.calculate_result())
        except ZeroDivisionError as exc:
            if self.on_error is None:
                calc.clear()
                raise
            self.on_error(str(exc))
        calc.clear()


class CalculatorWindow:
    """A display line above a grid of keypad buttons."""

    def __init__(self, root) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self.root = root
        self._messagebox = messagebox
        self.controller = KeypadController(Calculator(), self._show_error)
        self.display = tk.StringVar(master=root)

        entry = tk.Entry(root, textvariable=self.display, justify="right")
        entry.pack(fill="x", padx=4, pady=4)

        keypad = tk.Frame(root)
        keypad.pack(fill="both", expand=True, padx=4, pady=4)
        for key, (row, column) in KEY_POSITIONS.items():
            button = tk.Button(
                keypad, text=key, command=lambda k=key: self._press(k)
            )
            button.grid(row=row, column=column, sticky="nsew")
        for index in range(5):
            keypad.rowconfigure(index, weight=1)
        for index in range(4):
            keypad.columnconfigure(index, weight=1)

    def _press(self, key: str) -> None:
        self.display.set(self.controller.press(key))

    def _show_error(self, message: str) -> None:
        self._messagebox.showerror("Error", message, parent=self.root)


def main(argv: list[str] | None = None) -> int:
    """Open the calculator window and run until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    root.title("Calculator")
    CalculatorWindow(root)
    root.mainloop()
    return 0