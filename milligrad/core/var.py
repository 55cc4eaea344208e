# milligrad/core/var.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Optional

from .node import Node, LEAF_NODE


class Var:
    """
    Scalar node of the reverse-mode computation graph.

    Attributes
    ----------
    val : np.float64
        Forward (primal) value of this variable.
    grad : np.float64
        Accumulated derivative of the backward root w.r.t. this variable.
        Starts at 0 and is only ever added to, except for the root of a
        backward pass which is set to 1.
    node : Node
        How this variable was produced: operation tag, parent Vars and the
        numeric constant of the operation. Leaves share LEAF_NODE.
    visited : bool
        Traversal marker used by the backward pass; False between passes.
    name : Optional[str]
        Optional debug/pretty-print name.
    """

    __slots__ = ("val", "grad", "node", "visited", "name")

    def __init__(self, val, node: Node = LEAF_NODE, *, name: Optional[str] = None):
        # Scalar-only engine: reject sequences/arrays up front
        if isinstance(val, Var) or not isinstance(val, numbers.Real):
            raise TypeError(
                f"Var only accepts real scalars (int, float, numpy scalar), "
                f"but got {type(val)}"
            )
        self.val = np.float64(val)
        self.grad = np.float64(0.0)
        self.node = node
        self.visited = False
        self.name = name

    @property
    def parents(self):
        return self.node.parents

    @property
    def is_leaf(self) -> bool:
        return self.node.is_leaf

    def __repr__(self):
        label = f", name={self.name!r}" if self.name is not None else ""
        return f"Var(val={float(self.val)!r}, grad={float(self.grad)!r}, op={self.node.op_tag}{label})"

    def __float__(self):
        return float(self.val)

    def backward(self):
        """Populate `grad` on every Var this one depends on (see engine.backward)."""
        from .engine import backward
        return backward(self)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    # Elementary functions as methods: x.tanh(), x.log(), ...
    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def log(self, base=None):
        from ..ops.transcendental import log, log_base
        return log(self) if base is None else log_base(self, base)

    def sin(self):
        from ..ops.transcendental import sin
        return sin(self)

    def cos(self):
        from ..ops.transcendental import cos
        return cos(self)

    def tan(self):
        from ..ops.transcendental import tan
        return tan(self)

    def relu(self):
        from ..ops.activations import relu
        return relu(self)

    def tanh(self):
        from ..ops.activations import tanh
        return tanh(self)
