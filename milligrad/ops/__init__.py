# milligrad/ops/__init__.py

# Convenience re-exports so users can do: from milligrad.ops import mul, tanh, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import exp, log, log_base, sqrt, sin, cos, tan
from .activations import relu, tanh

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "exp", "log", "log_base", "sqrt", "sin", "cos", "tan",
    "relu", "tanh",
]
