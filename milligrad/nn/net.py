"""
Multilayer perceptron on top of the scalar autodiff engine.

A Network is a list of Layers, a Layer is a list of Units, and a Unit holds
one weight Parameter per input plus a bias Parameter. Every forward call
builds fresh graph nodes; only the Parameters persist between iterations.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..core.var import Var
from ..errors import DimensionMismatchError
from ..ops.activations import tanh
from .module import Module

logger = logging.getLogger(__name__)


class Parameter(Var):
    """Trainable leaf that survives across training iterations."""

    __slots__ = ()

    def __repr__(self):
        return f"Parameter(val={float(self.val)!r}, grad={float(self.grad)!r})"


def as_inputs(x: Sequence) -> List[Var]:
    """Wrap plain numbers as leaf Vars; Vars are passed through."""
    return [v if isinstance(v, Var) else Var(v) for v in x]


class Unit(Module):
    """
    Single perceptron: tanh(w . x + b), or the raw affine value for the
    output layer.

    Attributes:
        w (list[Parameter]): one weight per input
        b (Parameter): bias
    """

    def __init__(self, n_inputs: int, rng: np.random.Generator):
        """
        Initialize weights and bias from N(0, sqrt(2 / n_inputs)).

        Args:
            n_inputs: Number of inputs (weights)
            rng: Generator shared by the whole network
        """
        if n_inputs < 1:
            raise ValueError(f"n_inputs must be >= 1, got {n_inputs}")
        std = np.sqrt(2.0 / n_inputs)
        self.w = [Parameter(v) for v in rng.normal(0.0, std, size=n_inputs)]
        self.b = Parameter(rng.normal(0.0, std))

    @property
    def n_inputs(self) -> int:
        return len(self.w)

    def __call__(self, x: Sequence, activation: bool = True) -> Var:
        if len(x) != len(self.w):
            raise DimensionMismatchError(
                f"Dimension mismatch: unit has {len(self.w)} weights, got {len(x)} inputs"
            )
        act = self.w[0] * x[0]
        for wi, xi in zip(self.w[1:], x[1:]):
            act = act + wi * xi
        act = act + self.b
        return tanh(act) if activation else act

    def params(self) -> List[Parameter]:
        return self.w + [self.b]


class Layer(Module):
    """Units that all read the same input vector."""

    def __init__(self, n_inputs: int, n_outputs: int, rng: np.random.Generator):
        if n_outputs < 1:
            raise ValueError(f"n_outputs must be >= 1, got {n_outputs}")
        self.units = [Unit(n_inputs, rng) for _ in range(n_outputs)]

    @property
    def n_inputs(self) -> int:
        return self.units[0].n_inputs

    @property
    def n_outputs(self) -> int:
        return len(self.units)

    def __call__(self, x: Sequence, activation: bool = True) -> List[Var]:
        return [u(x, activation) for u in self.units]

    def params(self) -> List[Parameter]:
        return [p for u in self.units for p in u.params()]


class Network(Module):
    """
    Regression MLP: tanh on every hidden layer, linear output layer.

    Attributes:
        layers (list[Layer]): layer i maps widths[i-1] (or n_inputs) to widths[i]
        rng (np.random.Generator): owned generator, used for initialisation
            and for mini-batch sampling during training
    """

    def __init__(self, n_inputs: int, layer_widths: Sequence[int],
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Args:
            n_inputs: Width of the input vector
            layer_widths: Output width of each layer, at least one entry
            seed: Seed for a new generator (ignored when `rng` is given)
            rng: Existing generator to own instead of creating one
        """
        layer_widths = list(layer_widths)
        if not layer_widths:
            raise ValueError("layer_widths needs at least one entry")
        if n_inputs < 1 or any(w < 1 for w in layer_widths):
            raise ValueError(
                f"widths must be positive, got n_inputs={n_inputs}, layer_widths={layer_widths}"
            )

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        sizes = [n_inputs] + layer_widths
        self.layers = [Layer(sizes[i], sizes[i + 1], self.rng) for i in range(len(layer_widths))]
        logger.debug("Network %s: %d parameters", sizes, len(self.params()))

    @property
    def n_inputs(self) -> int:
        return self.layers[0].n_inputs

    @property
    def n_outputs(self) -> int:
        return self.layers[-1].n_outputs

    def __call__(self, x: Sequence) -> List[Var]:
        """Forward pass; numbers in `x` are wrapped as leaf Vars."""
        x = as_inputs(x)
        for layer in self.layers[:-1]:
            x = layer(x, activation=True)
        # No activation on the output layer
        return self.layers[-1](x, activation=False)

    def params(self) -> List[Parameter]:
        return [p for layer in self.layers for p in layer.params()]
