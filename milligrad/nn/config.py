"""
Training configuration.

Collects the knobs of a training run in one validated object, so a run can
be described by a plain dict (e.g. loaded from a JSON/YAML file by the
caller) and reproduced from its seed.
"""

import math
from dataclasses import dataclass, fields
from typing import Dict, Optional, Sequence

from .net import Network


@dataclass
class TrainConfig:
    """
    Attributes:
        epochs (int): Number of gradient-descent iterations, >= 0
        learning_rate (float): Step size, finite and > 0
        batch_size (int | None): None -> summed loss over every example;
            0 -> mean loss over every example; k -> mean over k sampled examples
        log_every (int): Log loss and predictions every this many epochs (0: never)
        seed (int | None): Seed for the network's generator
    """
    epochs: int = 100
    learning_rate: float = 0.05
    batch_size: Optional[int] = None
    log_every: int = 5
    seed: Optional[int] = None

    def __post_init__(self):
        if self.epochs < 0:
            raise ValueError(f"epochs must be >= 0, got {self.epochs}")
        if not (math.isfinite(self.learning_rate) and self.learning_rate > 0):
            raise ValueError(f"learning_rate must be finite and > 0, got {self.learning_rate}")
        if self.batch_size is not None and self.batch_size < 0:
            raise ValueError(f"batch_size must be >= 0 or None, got {self.batch_size}")
        if self.log_every < 0:
            raise ValueError(f"log_every must be >= 0, got {self.log_every}")

    @classmethod
    def from_dict(cls, d: Dict) -> "TrainConfig":
        """Build from a dict, ignoring keys that are not config fields."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in names})


def build_network(n_inputs: int, layer_widths: Sequence[int], config: TrainConfig) -> Network:
    """Network seeded from the config, so a run is reproducible from its config alone."""
    return Network(n_inputs, layer_widths, seed=config.seed)
