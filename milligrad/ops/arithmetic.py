# milligrad/ops/arithmetic.py
import numbers
import numpy as np
from ..core.var import Var
from ..core.node import Node


def _is_const(x):
    return isinstance(x, numbers.Real) and not isinstance(x, Var)


def _check_operands(x, y, op):
    for v in (x, y):
        if not isinstance(v, Var) and not _is_const(v):
            raise TypeError(f"unsupported operand type for {op}: {type(v).__name__}")
    if not isinstance(x, Var) and not isinstance(y, Var):
        raise TypeError(f"{op} needs at least one Var operand")


def _binary(x, y, f, tag):
    """
    Generic commutative binary primitive (add, mul):
      - computes out.val = f(x.val, y.val)
      - records both Vars as parents, or, when one operand is a plain
        number, the Var as the single parent and the number as node.const
    """
    _check_operands(x, y, tag)
    if isinstance(x, Var) and isinstance(y, Var):
        return Var(f(x.val, y.val), Node(tag, (x, y)))
    if isinstance(x, Var):
        var, k = x, y
    else:
        var, k = y, x
    k = np.float64(k)
    return Var(f(var.val, k), Node(tag, (var,), const=k))


def add(x, y): return _binary(x, y, lambda a, b: a + b, "add")
def mul(x, y): return _binary(x, y, lambda a, b: a * b, "mul")


def neg(x):
    """Unary negation: -x == x * -1."""
    return mul(x, -1.0)


def sub(x, y):
    """x - y == x + (-1 * y)."""
    _check_operands(x, y, "sub")
    if isinstance(y, Var):
        return add(x, neg(y))
    return add(x, -np.float64(y))


def div(x, y):
    """x / y == x * y**-1."""
    _check_operands(x, y, "div")
    if isinstance(y, Var):
        return mul(x, pow(y, -1.0))
    with np.errstate(all="ignore"):
        inv = np.float64(1.0) / np.float64(y)
    return mul(x, inv)


def pow(x, y):
    """
    Power, dispatched on which operand is a Var:
      Var ** k    -> "pow"   dy/dx = k * x^(k-1)
      k ** Var    -> "rpow"  dy/dx = y * ln(k)
      Var ** Var  -> "vpow"  both partials; d/d(exponent) needs x > 0

    Invalid domains (0 ** -1, negative base with fractional exponent,
    k <= 0 for "rpow") give inf/nan instead of raising.
    """
    _check_operands(x, y, "pow")
    with np.errstate(all="ignore"):
        if isinstance(x, Var) and isinstance(y, Var):
            return Var(x.val ** y.val, Node("vpow", (x, y)))
        if isinstance(x, Var):
            k = np.float64(y)
            return Var(x.val ** k, Node("pow", (x,), const=k))
        k = np.float64(x)
        return Var(k ** y.val, Node("rpow", (y,), const=k))
