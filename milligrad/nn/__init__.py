"""
Neural-network package built on the scalar autodiff engine.

Provides a regression MLP (Network -> Layer -> Unit), squared-error losses
and a plain gradient-descent training loop.
"""

from .module import Module
from .net import Parameter, Unit, Layer, Network
from .loss import mse_loss, mse_loss_batch
from .config import TrainConfig, build_network
from .train import EpochRecord, TrainHistory, train, fit

__all__ = [
    'Module',
    'Parameter',
    'Unit',
    'Layer',
    'Network',
    'mse_loss',
    'mse_loss_batch',
    'TrainConfig',
    'build_network',
    'EpochRecord',
    'TrainHistory',
    'train',
    'fit',
]
