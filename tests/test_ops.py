import math

import numpy as np
import pytest

from milligrad import Var, backward
from milligrad.ops import (
    add, mul, sub, div, neg, pow, exp, log, log_base, sqrt,
    sin, cos, tan, relu, tanh,
)


# ---------------- arithmetic ---------------- #
def test_addition():
    a, b = Var(2.0), Var(3.0)
    c = a + b
    backward(c)
    assert c.val == 5.0
    assert a.grad == 1.0
    assert b.grad == 1.0


def test_subtraction():
    a, b = Var(10.0), Var(4.0)
    c = a - b
    backward(c)
    assert c.val == 6.0
    assert a.grad == 1.0
    assert b.grad == -1.0


def test_multiplication():
    a, b = Var(4.0), Var(5.0)
    c = a * b
    backward(c)
    assert c.val == 20.0
    assert a.grad == 5.0
    assert b.grad == 4.0


def test_division():
    a, b = Var(10.0), Var(2.0)
    c = a / b
    backward(c)
    assert c.val == 5.0
    assert a.grad == 0.5
    assert b.grad == -2.5


def test_negation():
    a = Var(3.0)
    c = -a
    backward(c)
    assert c.val == -3.0
    assert a.grad == -1.0


def test_function_forms_match_operators():
    a, b = Var(1.5), Var(-2.0)
    assert add(a, b).val == (a + b).val
    assert sub(a, b).val == (a - b).val
    assert mul(a, b).val == (a * b).val
    assert div(a, b).val == (a / b).val
    assert neg(a).val == (-a).val


# ---------------- mixed Var / number ---------------- #
def test_mixed_add_records_single_parent():
    a = Var(2.0)
    for c in (a + 3, 3 + a):
        assert c.val == 5.0
        assert c.parents == (a,)
        assert c.node.const == 3.0


def test_mixed_mul():
    a = Var(2.0)
    c = 3 * a
    d = a * 3
    backward(c)
    assert c.val == d.val == 6.0
    assert a.grad == 3.0


def test_number_minus_var():
    a = Var(4.0)
    c = 1 - a
    backward(c)
    assert c.val == -3.0
    assert a.grad == -1.0


def test_var_minus_number():
    a = Var(4.0)
    c = a - 1.5
    backward(c)
    assert c.val == 2.5
    assert a.grad == 1.0


def test_number_over_var():
    a = Var(2.0)
    c = 6 / a
    backward(c)
    assert c.val == 3.0
    assert a.grad == -1.5


def test_var_over_number():
    a = Var(3.0)
    c = a / 4
    backward(c)
    assert c.val == 0.75
    assert a.grad == 0.25


def test_rejects_non_numeric_operands():
    a = Var(1.0)
    with pytest.raises(TypeError):
        a + "1"
    with pytest.raises(TypeError):
        mul(2.0, 3.0)


def test_var_is_scalar_only():
    with pytest.raises(TypeError):
        Var([1.0, 2.0])
    with pytest.raises(TypeError):
        Var(np.ones(3))
    with pytest.raises(TypeError):
        Var(Var(1.0))


# ---------------- powers ---------------- #
def test_constant_exponent():
    a = Var(3.0)
    c = pow(a, 2)
    backward(c)
    assert c.val == 9.0
    assert a.grad == 6.0


def test_operator_power():
    a = Var(2.0)
    c = a ** 3
    backward(c)
    assert c.val == 8.0
    assert a.grad == 12.0


def test_constant_base():
    a = Var(3.0)
    c = 2 ** a
    backward(c)
    assert c.val == 8.0
    assert c.node.op_tag == "rpow"
    assert a.grad == pytest.approx(8.0 * math.log(2.0))


def test_variable_base_and_exponent():
    a, b = Var(2.0), Var(3.0)
    c = a ** b
    backward(c)
    assert c.val == 8.0
    assert a.grad == pytest.approx(12.0)
    assert b.grad == pytest.approx(8.0 * math.log(2.0))


def test_sqrt():
    a = Var(4.0)
    c = sqrt(a)
    backward(c)
    assert c.val == 2.0
    assert a.grad == pytest.approx(0.25)


# ---------------- exp / log ---------------- #
def test_logarithm_base_e():
    a = Var(math.e)
    c = log_base(a, math.e)
    backward(c)
    assert c.val == pytest.approx(1.0)
    assert a.grad == pytest.approx(1.0 / math.e)


def test_logarithm_base_2():
    a = Var(8.0)
    c = log_base(a, 2)
    backward(c)
    assert c.val == pytest.approx(3.0)
    assert a.grad == pytest.approx(1.0 / (8.0 * math.log(2.0)))


def test_natural_log_method():
    a = Var(2.0)
    c = a.log()
    backward(c)
    assert c.val == pytest.approx(math.log(2.0))
    assert a.grad == pytest.approx(0.5)
    assert a.log(10).val == pytest.approx(math.log10(2.0))


def test_exp():
    a = Var(1.0)
    c = exp(a)
    backward(c)
    assert c.val == pytest.approx(math.e)
    assert a.grad == pytest.approx(math.e)


def test_log_of_non_positive_propagates_silently():
    a = Var(-1.0)
    c = log(a)
    backward(c)
    assert math.isnan(c.val)
    assert a.grad == pytest.approx(-1.0)

    z = Var(0.0)
    d = log(z)
    backward(d)
    assert d.val == -math.inf
    assert math.isinf(z.grad)


def test_zero_to_negative_power_is_inf():
    a = Var(0.0)
    c = a ** -1
    assert math.isinf(c.val)


# ---------------- trigonometric ---------------- #
@pytest.mark.parametrize("fn, f, df", [
    (sin, math.sin, math.cos),
    (cos, math.cos, lambda x: -math.sin(x)),
    (tan, math.tan, lambda x: 1.0 / math.cos(x) ** 2),
])
def test_trig(fn, f, df):
    x0 = 0.7
    a = Var(x0)
    c = fn(a)
    backward(c)
    assert c.val == pytest.approx(f(x0))
    assert a.grad == pytest.approx(df(x0))


def test_trig_methods():
    a = Var(0.3)
    assert a.sin().val == pytest.approx(math.sin(0.3))
    assert a.cos().val == pytest.approx(math.cos(0.3))
    assert a.tan().val == pytest.approx(math.tan(0.3))


# ---------------- activations ---------------- #
def test_relu():
    a, b = Var(-2.0), Var(2.0)
    c = relu(a)
    d = relu(b)
    backward(c)
    backward(d)
    assert c.val == 0.0
    assert d.val == 2.0
    assert a.grad == 0.0
    assert b.grad == 1.0


def test_relu_at_zero_blocks_gradient():
    a = Var(0.0)
    c = a.relu()
    backward(c)
    assert c.val == 0.0
    assert a.grad == 0.0


def test_tanh():
    a = Var(1.0)
    b = tanh(a)
    backward(b)
    t = math.tanh(1.0)
    assert b.val == pytest.approx(t)
    assert a.grad == pytest.approx(1.0 - t * t)


def test_tanh_saturates_for_large_input():
    a = Var(1000.0)
    b = a.tanh()
    backward(b)
    assert b.val == 1.0
    assert a.grad == 0.0


def test_ops_on_parameters_return_plain_vars():
    from milligrad.nn import Parameter
    p = Parameter(0.5)
    assert type(relu(p)) is Var
    assert type(tanh(p)) is Var
    assert type(p * 2) is Var
