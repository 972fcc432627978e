# calcpad

A small keypad calculator. It opens a window with a display line and a grid
of buttons:

```
 %   C   ^
 7   8   9   +
 4   5   6   -
 1   2   3   *
 .   0   =   /
```

Type a number, press an operator, type a second number and press `=`. `C`
clears everything. Dividing or taking a modulo by zero shows an error dialog
instead of a result.

The calculation engine is a plain class and can be used without the window.

## Installing

```
pip install .
```

The window uses `tkinter` from the standard library. No other packages are
needed, but your Python must have been built with Tk support.

## Running

```
calcpad
```

This starts `calcpad.gui.main`, which opens the window and returns when it is
closed.

## Using the engine

`calcpad.calculator.Calculator` keeps two operands (`first_operand`,
`second_operand`), an `operator` and the text typed so far
(`current_input`).

```python
from calcpad.calculator import Calculator, Operator

calc = Calculator()
calc.enter_digit(2)
calc.enter_decimal_point()
calc.enter_digit(5)
calc.current_input             # "2.5"
calc.choose_operator(Operator.ADD)
calc.first_operand             # 2.5
calc.second_operand = 0.5
calc.calculate_result()        # 3.0
calc.clear()
```

- `enter_digit` appends a digit; `enter_decimal_point` appends a point
  unless one is already there, writing `0.` when the input is empty.
- `choose_operator` takes an `Operator` or its symbol (`"+"`, `"-"`, `"*"`,
  `"/"`, `"%"`, `"^"`), stores the typed input as the first operand (input
  that is empty or not a number counts as 0) and starts a fresh input.
- `calculate_result` applies the chosen operator to the two operands and
  returns 0.0 when no operator has been chosen.
- `clear` resets operands, operator and input.

The operations are also available directly:

```python
calc.add(3.0, 5.0)      # 8.0
calc.modulo(20, 3)      # 2.0 (sign follows the first operand)
calc.power(2, 3)        # 8.0
calc.divide(1, 0)       # raises ZeroDivisionError("Division by zero")
calc.modulo(1, 0)       # raises ZeroDivisionError("Modulo by zero")
```

`power` returns `inf` or `nan` rather than raising on overflow or on an
undefined result.

## Driving the keypad without a window

`calcpad.gui.KeypadController` takes key presses as strings (`"0"`–`"9"`,
`"."`, `"+"`, `"-"`, `"*"`, `"/"`, `"%"`, `"^"`, `"="`, `"C"`) and returns
the text the display should show. Any other key raises `ValueError`.

```python
from calcpad.gui import KeypadController

errors = []
pad = KeypadController(on_error=errors.append)
for key in "12+30":
    pad.press(key)
pad.press("=")      # "42"
```

When `=` hits a division or modulo by zero, the message goes to `on_error`;
if `on_error` is `None` the `ZeroDivisionError` is raised instead. Either way
the calculator is cleared after `=`.

`calcpad.gui.format_number` renders results the way the display does: six
significant digits in the shortest form (`format_number(8.0)` gives `"8"`).

## Limitations

- Each calculation is one operator between two numbers; there is no operator
  precedence and no chaining. After `=` the calculator is cleared, so a
  result cannot be used as the first operand of the next calculation.
- The window responds only to its buttons, not to the keyboard.
- There is no memory and no history of past results.

## Tests

```
pip install .[test]
pytest
```