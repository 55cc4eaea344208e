# milligrad/core/engine.py
from __future__ import annotations
import numpy as np
from typing import List

from .node import LEAF
from .var import Var


def topological_order(root: Var) -> List[Var]:
    """
    Return every Var reachable from `root` along parent edges, each one
    after all of its parents (post-order DFS). `root` is last.

    Shared sub-graphs are emitted once thanks to the `visited` marker, so the
    cost is linear in the number of distinct nodes, not in the number of
    paths. All markers are cleared before returning.
    """
    order = _collect(root)
    _clear_markers(order)
    return order


def _clear_markers(order: List[Var]) -> None:
    for v in order:
        v.visited = False


def _collect(root: Var) -> List[Var]:
    # Iterative post-order DFS; leaves `visited` set on every emitted Var.
    # Stack entries are (var, expanded): a Var is emitted when popped the
    # second time, i.e. after all of its parents have been emitted.
    order: List[Var] = []
    stack = [(root, False)]
    while stack:
        v, expanded = stack.pop()
        if expanded:
            order.append(v)
            continue
        if v.visited:
            continue
        v.visited = True
        stack.append((v, True))
        # Push in reverse so the first operand is explored first
        for p in reversed(v.node.parents):
            if not p.visited:
                stack.append((p, False))
    return order


def backward(root: Var) -> List[Var]:
    """
    Run a single reverse pass from `root`.

    After the call, every Var reachable from `root` holds in `.grad` the
    partial derivative of `root.val` w.r.t. its own `.val`, added on top of
    whatever it held before (call zero_grads / Module.zero_grad first to
    start clean). `root.grad` itself is set to 1.

    Notes:
        - Vars are processed in reverse topological order, so every consumer
          of a Var has pushed its contribution before the Var pushes to its
          own parents.
        - nan/inf values propagate silently; floating-point warnings are
          muted for the duration of the sweep.

    Returns the topological order that was used (parents first).
    """
    order = _collect(root)

    # Seed
    root.grad = np.float64(1.0)

    # Backward sweep; markers are cleared even if a rule raises midway
    try:
        with np.errstate(all="ignore"):
            for v in reversed(order):
                local_backward(v)
    finally:
        _clear_markers(order)
    return order


def local_backward(v: Var) -> None:
    """
    Push `v.grad * (d v / d p)` onto every parent p of `v`.

    Dispatches on the operation tag recorded in `v.node`; the constant of
    the operation (scalar operand, exponent, base) comes from `node.const`.
    """
    node = v.node
    tag = node.op_tag
    g = v.grad

    if tag == LEAF:
        return

    parents = node.parents

    # ---------- Linear ----------
    if tag == "add":
        # y = a + b, or y = a + k with a single parent
        for p in parents:
            p.grad = p.grad + g
        return

    if tag == "mul":
        if len(parents) == 2:
            # y = a * b ; dy/da = b, dy/db = a
            a, b = parents
            a.grad = a.grad + b.val * g
            b.grad = b.grad + a.val * g
        else:
            # y = a * k
            (a,) = parents
            a.grad = a.grad + node.const * g
        return

    # ---------- Powers ----------
    if tag == "pow":
        # y = a ** k
        (a,) = parents
        k = node.const
        a.grad = a.grad + k * a.val ** (k - 1.0) * g
        return

    if tag == "rpow":
        # y = k ** a ; dy/da = y * ln(k)
        (a,) = parents
        a.grad = a.grad + v.val * np.log(node.const) * g
        return

    if tag == "vpow":
        # y = a ** b (both variables); dy/db needs a > 0
        a, b = parents
        a.grad = a.grad + b.val * a.val ** (b.val - 1.0) * g
        b.grad = b.grad + v.val * np.log(a.val) * g
        return

    # ---------- Exponential / logarithm ----------
    if tag == "exp":
        (a,) = parents
        a.grad = a.grad + v.val * g
        return

    if tag == "log":
        # y = ln(a) / ln(k)
        (a,) = parents
        a.grad = a.grad + g / (a.val * np.log(node.const))
        return

    # ---------- Trigonometric ----------
    if tag == "sin":
        (a,) = parents
        a.grad = a.grad + np.cos(a.val) * g
        return

    if tag == "cos":
        (a,) = parents
        a.grad = a.grad - np.sin(a.val) * g
        return

    if tag == "tan":
        # sec^2(a) = 1 / cos^2(a)
        (a,) = parents
        a.grad = a.grad + g / (np.cos(a.val) ** 2)
        return

    # ---------- Activations ----------
    if tag == "relu":
        (a,) = parents
        if a.val > 0:
            a.grad = a.grad + g
        return

    if tag == "tanh":
        (a,) = parents
        t = v.val
        a.grad = a.grad + (1.0 - t * t) * g
        return

    raise ValueError(f"No backward rule for operation tag {tag!r}")


def zero_grads(root: Var) -> None:
    """
    Set `grad` to zero on every Var reachable from `root` (root included),
    so the same graph can be swept again from a clean state.
    """
    for v in topological_order(root):
        v.grad = np.float64(0.0)
