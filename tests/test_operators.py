import math
import warnings

import pytest

from core import Operators, DivisionByZeroError


def test_arithmetic():
    assert Operators.add(1.5, 2) == 3.5
    assert Operators.sub(1, 3) == -2.0
    assert Operators.mul(-2, 4) == -8.0
    assert Operators.div(1, 4) == 0.25


def test_results_are_python_floats():
    assert type(Operators.add(1, 2)) is float


@pytest.mark.parametrize("divisor", [0, 0.0, -0.0])
def test_div_by_zero(divisor):
    with pytest.raises(DivisionByZeroError) as excinfo:
        Operators.div(3, divisor)
    assert excinfo.value.dividend == 3.0


def test_overflow_is_not_clipped():
    assert Operators.mul(1e200, 1e200) == math.inf
    assert Operators.add(-1e308, -1e308) == -math.inf


def test_nan_operands_propagate():
    assert math.isnan(Operators.add(float("nan"), 1))


@pytest.mark.parametrize("op, operand1, operand2", [
    (Operators.add, math.inf, -math.inf),
    (Operators.sub, math.inf, math.inf),
    (Operators.mul, math.inf, 0.0),
    (Operators.div, math.inf, math.inf),
])
def test_invalid_results_are_nan_without_warnings(op, operand1, operand2):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert math.isnan(op(operand1, operand2))
