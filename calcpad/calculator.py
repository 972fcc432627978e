"""Arithmetic engine and keypad input state for a simple calculator."""

from __future__ import annotations

import math
from enum import Enum


class Operator(str, Enum):
    """Binary operators the calculator understands, keyed by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    POWER = "^"


def _to_number(text: str) -> float:
    """Read typed input as a number; anything unreadable counts as zero."""
    try:
        return float(text)
    except ValueError:
        return 0.0


class Calculator:
    """Holds two operands, an operator and the digits typed so far."""

    def __init__(self) -> None:
        self.first_operand: float = 0.0
        self.second_operand: float = 0.0
        self._operator: Operator | None = None
        self._input = ""

    @property
    def operator(self) -> Operator | None:
        return self._operator

    @operator.setter
    def operator(self, op: Operator | str | None) -> None:
        self._operator = None if op is None else Operator(op)

    @property
    def current_input(self) -> str:
        """The digits and decimal point typed since the last operator."""
        return self._input

    def add(self, x: float, y: float) -> float:
        return x + y

    def subtract(self, x: float, y: float) -> float:
        return x - y

    def multiply(self, x: float, y: float) -> float:
        return x * y

    def divide(self, x: float, y: float) -> float:
        if y == 0:
            raise ZeroDivisionError("Division by zero")
        return float(x) / float(y)

    def modulo(self, x: float, y: float) -> float:
        """Remainder with the sign of ``x``, as the C library computes it."""
        if y == 0:
            raise ZeroDivisionError("Modulo by zero")
        try:
            return math.fmod(x, y)
        except ValueError:
            return math.nan

    def power(self, base: float, exponent: float) -> float:
        """Raise ``base`` to ``exponent``, giving inf or nan instead of raising."""
        base = float(base)
        exponent = float(exponent)
        odd_integer = exponent.is_integer() and int(exponent) % 2 == 1
        try:
            return math.pow(base, exponent)
        except OverflowError:
            return -math.inf if base < 0 and odd_integer else math.inf
        except ValueError:
            if base == 0 and exponent < 0:
                return math.copysign(math.inf, base) if odd_integer else math.inf
            return math.nan

    def calculate_result(self) -> float:
        """Apply the chosen operator to the operands; 0 when none is chosen."""
        if self._operator is None:
            return 0.0
        handlers = {
            Operator.ADD: self.add,
            Operator.SUBTRACT: self.subtract,
            Operator.MULTIPLY: self.multiply,
            Operator.DIVIDE: self.divide,
            Operator.MODULO: self.modulo,
            Operator.POWER: self.power,
        }
        return handlers[self._operator](self.first_operand, self.second_operand)

    def clear(self) -> None:
        """Reset operands, operator and typed input."""
        self.first_operand = 0.0
        self.second_operand = 0.0
        self._operator = None
        self._input = ""

    def enter_digit(self, digit: int) -> None:
        self._input += str(int(digit))

    def enter_decimal_point(self) -> None:
        """Add a decimal point unless one is already present."""
        if "." in self._input:
            return
        self._input += "." if self._input else "0."

    def choose_operator(self, op: Operator | str) -> None:
        """Store the typed input as the first operand and start a new entry."""
        self.first_operand = _to_number(self._input)
        self.operator = op
        self._input = ""