"""
Base class for everything in the network that owns trainable parameters.

Unit, Layer and Network all expose the same two capabilities:

    params()    : the Parameter leaves they own, in a fixed order
    zero_grad() : reset the gradient of each of those leaves to zero

The base class holds no state; composites implement params() by
delegating to their children.
"""

from abc import ABC, abstractmethod
from typing import List

import numpy as np


class Module(ABC):
    """Abstract base for parameter-owning network components."""

    @abstractmethod
    def params(self) -> List:
        """
        Return the Parameter leaves owned by this module.

        Returns:
            list of Parameter, in layer -> unit -> weights -> bias order
        """
        pass

    def zero_grad(self) -> None:
        """
        Reset every parameter gradient to zero. Must be called before each
        backward pass, otherwise gradients of the previous iteration add up.
        """
        for p in self.params():
            p.grad = np.float64(0.0)
