"""
Plain gradient-descent training loop.

Each epoch rebuilds the whole graph from the persistent Parameters:
forward every example -> loss -> zero_grad -> backward -> p -= lr * grad.
The loop always runs exactly `epochs` iterations; there is no convergence
check and no early stopping.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.engine import backward
from ..errors import DimensionMismatchError
from .config import TrainConfig
from .loss import mse_loss, mse_loss_batch, resolve_batch_size
from .net import Network, as_inputs

logger = logging.getLogger(__name__)

DEFAULT_LOG_EVERY = 5


@dataclass
class EpochRecord:
    """Loss and predictions after the forward pass of one epoch (before the update)."""
    epoch: int
    loss: float
    predictions: List[float]


@dataclass
class TrainHistory:
    records: List[EpochRecord] = field(default_factory=list)

    @property
    def losses(self) -> List[float]:
        return [r.loss for r in self.records]

    @property
    def final_loss(self) -> Optional[float]:
        return self.records[-1].loss if self.records else None

    def checkpoints(self, every: int = DEFAULT_LOG_EVERY) -> List[EpochRecord]:
        """Records of epochs every, 2*every, ..."""
        return [r for r in self.records if r.epoch % every == 0]

    def __len__(self):
        return len(self.records)


def train(model: Network, inputs: Sequence[Sequence], labels: Sequence,
          epochs: int, learning_rate: float, batch_size: Optional[int] = None,
          log_every: int = DEFAULT_LOG_EVERY) -> TrainHistory:
    """
    Fit `model` to (inputs, labels) with full-graph gradient descent.

    Args:
        model: Network with a single output unit
        inputs: One input vector per example (numbers or Vars)
        labels: One target per example (numbers or Vars)
        epochs: Number of iterations, >= 0
        learning_rate: Gradient-descent step size, finite and > 0
        batch_size: None -> summed squared error over every example;
            otherwise mean squared error over `batch_size` examples sampled
            with the model's generator each epoch (0 means all of them)
        log_every: Log loss and predictions at INFO every this many epochs (0: never)

    Returns:
        TrainHistory with one EpochRecord per epoch
    """
    if len(inputs) != len(labels):
        raise DimensionMismatchError(
            f"{len(inputs)} input vectors but {len(labels)} labels"
        )
    if model.n_outputs != 1:
        raise DimensionMismatchError(
            f"train expects a single-output network, got {model.n_outputs} outputs"
        )
    if epochs < 0:
        raise ValueError(f"epochs must be >= 0, got {epochs}")
    if not (math.isfinite(learning_rate) and learning_rate > 0):
        raise ValueError(f"learning_rate must be finite and > 0, got {learning_rate}")
    if batch_size is not None:
        resolve_batch_size(batch_size, len(labels))

    # Leaves are built once; intermediate nodes are rebuilt every epoch
    x = [as_inputs(xi) for xi in inputs]
    y = as_inputs(labels)
    parameters = model.params()
    history = TrainHistory()

    for e in range(1, epochs + 1):
        # forward pass, one output per example
        y_pred = [model(xi)[0] for xi in x]

        # loss, flush, backprop
        if batch_size is None:
            loss = mse_loss(y, y_pred)
        else:
            loss = mse_loss_batch(y, y_pred, batch_size, model.rng)
        model.zero_grad()
        backward(loss)

        # gradient descent
        for p in parameters:
            p.val = p.val - learning_rate * p.grad

        record = EpochRecord(e, float(loss.val), [float(p.val) for p in y_pred])
        history.records.append(record)
        logger.debug("epoch %d loss %.6f", e, record.loss)
        if log_every and e % log_every == 0:
            logger.info("iteration: %d, loss: %.6f", e, record.loss)
            logger.info("predictions: %s", " ".join(f"{v:.6f}" for v in record.predictions))

    return history


def fit(model: Network, inputs: Sequence[Sequence], labels: Sequence,
        config: TrainConfig) -> TrainHistory:
    """train() driven by a TrainConfig."""
    return train(model, inputs, labels, config.epochs, config.learning_rate,
                 batch_size=config.batch_size, log_every=config.log_every)
