"""
Wave displacement models.
"""

from .base import NullWaveModel, WaveModel
from .love import LoveWaveModel
from .rayleigh import RayleighMaterial, RayleighWaveModel
from .register import build_default_registry
from .registry import ModelRegistry

__all__ = [
    'LoveWaveModel',
    'ModelRegistry',
    'NullWaveModel',
    'RayleighMaterial',
    'RayleighWaveModel',
    'WaveModel',
    'build_default_registry',
]
