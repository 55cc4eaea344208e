# milligrad/__init__.py
# Scalar reverse-mode automatic differentiation and a small MLP on top of it

from .core.var import Var
from .core.engine import backward, topological_order, zero_grads

from .ops import (
    add, sub, mul, div, neg, pow,
    exp, log, log_base, sqrt, sin, cos, tan,
    relu, tanh,
)

from . import nn
from .nn import Network, train

from .errors import MilligradError, DimensionMismatchError, InvalidBatchSizeError

__version__ = "0.1.0"

__all__ = [
    # Core
    'Var',
    'backward',
    'topological_order',
    'zero_grads',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'exp', 'log', 'log_base', 'sqrt', 'sin', 'cos', 'tan',
    'relu', 'tanh',
    # Network
    'nn',
    'Network',
    'train',
    # Errors
    'MilligradError',
    'DimensionMismatchError',
    'InvalidBatchSizeError',
]
