# milligrad/core/__init__.py

"""
Core public API of the autodiff engine.

Exports:
    Var               : Scalar node of the computation graph.
    Node              : Operation record (tag, parents, constant) attached to a Var.
    backward          : Run a reverse pass and fill `grad` on the reachable graph.
    zero_grads        : Reset `grad` on every Var reachable from a root.
    topological_order : Parents-first ordering of the reachable graph.
    grad, grads       : Convenience: derivative(s) of a function at given point(s).
    value             : Convenience: extract the primal value of a Var.
"""

from .var import Var
from .node import Node
from .engine import backward, local_backward, topological_order, zero_grads
from .seeds import grad, grads, grads_list, value
from .graph_utils import get_graph_stats, print_graph_summary

__all__ = [
    "Var", "Node",
    "backward", "local_backward", "topological_order", "zero_grads",
    "grad", "grads", "grads_list", "value",
    "get_graph_stats", "print_graph_summary",
]
