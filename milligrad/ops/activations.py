# milligrad/ops/activations.py
import numpy as np
from ..core.var import Var
from ..core.node import Node
from .transcendental import _as_var


def relu(x):
    """
    Primitive: max(0, x). Records the local partial as a step: the gradient
    passes through unchanged when x > 0 and is dropped otherwise (x == 0
    included).
    """
    x = _as_var(x, "relu")
    return Var(x.val if x.val > 0 else 0.0, Node("relu", (x,)))


def tanh(x):
    """
    Primitive: (e^{2x} - 1) / (e^{2x} + 1), evaluated with np.tanh so large
    |x| saturates at +-1 instead of overflowing to nan.
    Local partial 1 - tanh(x)^2 is computed from the output value.
    """
    x = _as_var(x, "tanh")
    return Var(np.tanh(x.val), Node("tanh", (x,)))
