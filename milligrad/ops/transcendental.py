# milligrad/ops/transcendental.py
import math
import numpy as np
from ..core.var import Var
from ..core.node import Node
from .arithmetic import pow


def _as_var(x, op):
    if not isinstance(x, Var):
        raise TypeError(f"{op} expects a Var, got {type(x).__name__}")
    return x


def _unary(x, f, tag, const=None):
    x = _as_var(x, tag)
    with np.errstate(all="ignore"):
        val = f(x.val)
    return Var(val, Node(tag, (x,), const=const))


def exp(x):
    return _unary(x, np.exp, "exp")


def log_base(x, base):
    """
    Logarithm in an arbitrary constant base: ln(x) / ln(base).
    Non-positive x gives nan/-inf, silently.
    """
    k = np.float64(base)
    return _unary(x, lambda v: np.log(v) / np.log(k), "log", const=k)


def log(x):
    """Natural logarithm."""
    return log_base(x, math.e)


def sqrt(x):
    return pow(x, 0.5)


def sin(x): return _unary(x, np.sin, "sin")
def cos(x): return _unary(x, np.cos, "cos")
def tan(x): return _unary(x, np.tan, "tan")
