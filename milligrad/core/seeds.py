# milligrad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
import numbers
from typing import Any, Callable, Dict, Iterable, List

import numpy as np

from .var import Var
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Var; pass through plain numbers unchanged."""
    return x.val if isinstance(x, Var) else x


def _ensure_var(v: Any, *, name: str) -> Var:
    """Wrap a plain number as a leaf Var if needed; otherwise return the Var itself."""
    return v if isinstance(v, Var) else Var(v, name=name)


def _run(f, args) -> None:
    y = f(args)
    if isinstance(y, Var):
        backward(y)
    elif not isinstance(y, numbers.Real):
        raise TypeError(f"f must return a Var or a number, got {type(y).__name__}")
    # A plain-number result does not depend on the inputs: gradients stay 0


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Var], Var], x0: float) -> np.float64:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds a fresh graph and runs one reverse pass.
    """
    x = Var(x0, name="x")
    _run(f, x)
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Var]], Var],
          inputs: Dict[str, float]) -> Dict[str, np.float64]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Var} and returning a Var
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: gradient}  # same key order as `inputs`
    """
    vars_: Dict[str, Var] = {k: _ensure_var(v, name=k) for k, v in inputs.items()}
    _run(f, vars_)
    return {k: vars_[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Var]], Var],
               x0_list: Iterable[float]) -> List[np.float64]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Var] = [_ensure_var(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    _run(f, xs)
    return [x.grad for x in xs]
