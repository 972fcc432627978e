import math

import pytest

from calcpad.calculator import Calculator, Operator


def _compute(first, second, op):
    calc = Calculator()
    calc.first_operand = first
    calc.second_operand = second
    calc.operator = op
    return calc.calculate_result()


def test_addition():
    assert _compute(3, 5, "+") == 8.0


def test_subtraction():
    assert _compute(10, 4, "-") == 6.0


def test_multiplication():
    assert _compute(3, 7, "*") == 21.0


def test_division():
    assert _compute(20, 4, "/") == 5.0


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="Division by zero"):
        _compute(20, 0, "/")


def test_clear_after_error():
    calc = Calculator()
    calc.first_operand = 20
    calc.second_operand = 0
    calc.operator = "/"
    with pytest.raises(ZeroDivisionError):
        calc.calculate_result()
    calc.clear()
    calc.first_operand = 1
    calc.second_operand = 1
    calc.operator = "+"
    assert calc.calculate_result() == 2.0


def test_modulo():
    assert _compute(20, 3, "%") == 2.0


def test_power():
    assert _compute(2, 3, "^") == 8.0


def test_decimal_addition():
    assert _compute(2.5, 0.5, "+") == 3.0


def test_addition_with_negative_operand():
    assert _compute(3, -5, "+") == -2.0


def test_sequential_operations():
    calc = Calculator()
    calc.first_operand = 2
    calc.second_operand = 3
    calc.operator = Operator.ADD
    result = calc.calculate_result()
    calc.first_operand = result
    calc.second_operand = 4
    calc.operator = Operator.MULTIPLY
    assert calc.calculate_result() == 20.0


def test_modulo_by_zero():
    with pytest.raises(ZeroDivisionError, match="Modulo by zero"):
        _compute(20, 0, "%")


def test_modulo_keeps_sign_of_dividend():
    calc = Calculator()
    assert calc.modulo(-7, 3) == -1.0


def test_no_operator_gives_zero():
    calc = Calculator()
    calc.first_operand = 4
    calc.second_operand = 5
    assert calc.calculate_result() == 0.0


def test_unknown_operator_rejected():
    calc = Calculator()
    with pytest.raises(ValueError):
        calc.operator = "&"
    assert calc.operator is None


def test_operator_symbol_is_coerced():
    calc = Calculator()
    calc.operator = "^"
    assert calc.operator is Operator.POWER


def test_power_pole_is_infinite():
    assert Calculator().power(0, -1) == math.inf


def test_power_of_negative_base_fractional_exponent_is_nan():
    result = Calculator().power(-8, 0.5)
    assert str(result) == "nan"


def test_power_overflow_keeps_sign():
    assert Calculator().power(-10, 1001) == -math.inf
    assert Calculator().power(10, 1000) == math.inf


def test_modulo_of_infinity_is_nan():
    assert math.isnan(Calculator().modulo(math.inf, 3))


def test_digits_append_to_input():
    calc = Calculator()
    for digit in (4, 0, 2):
        calc.enter_digit(digit)
    assert calc.current_input == "402"


def test_decimal_point_on_empty_input_adds_leading_zero():
    calc = Calculator()
    calc.enter_decimal_point()
    assert calc.current_input == "0."


def test_decimal_point_added_only_once():
    calc = Calculator()
    calc.enter_digit(1)
    calc.enter_decimal_point()
    calc.enter_digit(5)
    calc.enter_decimal_point()
    assert calc.current_input == "1.5"


@pytest.mark.parametrize("op", list(Operator))
def test_choose_operator_stores_first_operand(op):
    calc = Calculator()
    calc.enter_digit(1)
    calc.enter_decimal_point()
    calc.enter_digit(5)
    calc.choose_operator(op)
    assert calc.first_operand == 1.5
    assert calc.operator is op
    assert calc.current_input == ""


def test_choose_operator_with_empty_input_uses_zero():
    calc = Calculator()
    calc.first_operand = 9
    calc.choose_operator("-")
    assert calc.first_operand == 0.0


def test_choose_operator_accepts_trailing_point():
    calc = Calculator()
    calc.enter_digit(5)
    calc.enter_decimal_point()
    calc.choose_operator(Operator.ADD)
    assert calc.first_operand == 5.0


def test_clear_resets_everything():
    calc = Calculator()
    calc.enter_digit(7)
    calc.choose_operator("*")
    calc.second_operand = 3
    calc.enter_digit(2)
    calc.clear()
    assert calc.first_operand == 0.0
    assert calc.second_operand == 0.0
    assert calc.operator is None
    assert calc.current_input == ""