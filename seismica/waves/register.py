"""
Wave model registration module.

Call build_default_registry() at application startup to get the fixed set of
available models.
"""

from __future__ import annotations

from seismica import defaults
from seismica.types import WaveParameters

from .base import NullWaveModel
from .love import LoveWaveModel
from .rayleigh import RayleighWaveModel
from .registry import ModelRegistry


def build_default_registry(
    parameters: WaveParameters | None = None,
    size: float = defaults.GEOMETRY_SIZE,
    active: str = defaults.DEFAULT_MODEL,
) -> ModelRegistry:
    """
    Build the registry of all available wave models.

    Order is fixed: null, love, rayleigh.
    """
    if parameters is None:
        parameters = WaveParameters.from_defaults()

    registry = ModelRegistry(
        [
            NullWaveModel(parameters, size),
            LoveWaveModel(parameters, size),
            RayleighWaveModel(parameters, size),
        ],
        parameters=parameters,
        active=active,
    )
    return registry
