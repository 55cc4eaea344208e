"""
Squared-error losses over graph nodes.
"""

from typing import Sequence

import numpy as np

from ..core.var import Var
from ..errors import DimensionMismatchError, InvalidBatchSizeError


def _check_pairs(ytrue: Sequence, ypred: Sequence) -> None:
    if len(ytrue) != len(ypred):
        raise DimensionMismatchError(
            f"ytrue has {len(ytrue)} entries but ypred has {len(ypred)}"
        )
    if len(ytrue) == 0:
        raise DimensionMismatchError("loss needs at least one (ytrue, ypred) pair")


def mse_loss(ytrue: Sequence, ypred: Sequence[Var]) -> Var:
    """
    Squared-error loss over all pairs: sum_i (ytrue_i - ypred_i)^2.

    Entries of `ytrue` may be Vars or plain numbers.
    """
    _check_pairs(ytrue, ypred)
    loss = (ytrue[0] - ypred[0]) ** 2
    for yt, yp in zip(ytrue[1:], ypred[1:]):
        loss = loss + (yt - yp) ** 2
    return loss


def resolve_batch_size(batch_size: int, n: int) -> int:
    """
    Validate a mini-batch size against n examples; 0 means the full batch.
    """
    if batch_size == 0:
        return n
    if not 1 <= batch_size <= n:
        raise InvalidBatchSizeError(
            f"batch_size must be in [1, {n}] (or 0 for full batch), got {batch_size}"
        )
    return int(batch_size)


def mse_loss_batch(ytrue: Sequence, ypred: Sequence[Var], batch_size: int,
                   rng: np.random.Generator) -> Var:
    """
    Mini-batch estimate of the loss: squared error summed over `batch_size`
    pairs chosen by a random permutation, divided by `batch_size`.

    Args:
        ytrue: True values (Vars or numbers)
        ypred: Predicted Vars, same length
        batch_size: Pairs to sample, in [1, len(ytrue)]; 0 means all of them
        rng: Generator to draw the permutation from (the network's own)
    """
    _check_pairs(ytrue, ypred)
    batch_size = resolve_batch_size(batch_size, len(ytrue))
    idx = rng.permutation(len(ytrue))[:batch_size]
    loss = mse_loss([ytrue[i] for i in idx], [ypred[i] for i in idx])
    return loss / batch_size
