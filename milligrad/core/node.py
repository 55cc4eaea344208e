# milligrad/core/node.py
from dataclasses import dataclass
from typing import Any, Optional, Tuple

LEAF = "leaf"


@dataclass(frozen=True)
class Node:
    """
    Record of the primitive operation that produced a Var.

    Attributes
    ----------
    op_tag : str
        Operation kind (e.g., "add", "mul", "relu"). "leaf" for inputs,
        labels and parameters.
    parents : Tuple[Var, ...]
        The 0, 1 or 2 Vars this one was computed from, in operand order.
    const : float | None
        The numeric parameter the operation needs, if any:
          - scalar operand of a mixed add/mul (x + 3, 2 * x)
          - exponent of "pow", base of "rpow"
          - logarithm base of "log"
    """
    op_tag: str
    parents: Tuple[Any, ...] = ()
    const: Optional[float] = None

    @property
    def is_leaf(self) -> bool:
        return not self.parents


LEAF_NODE = Node(op_tag=LEAF)
