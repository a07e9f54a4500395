"""Toolkit-neutral glue between UI controls and the wave engine."""

from .parameter_manager import CONTROL_RANGES, ParameterKey, ParameterManager, clamp

__all__ = [
    'CONTROL_RANGES',
    'ParameterKey',
    'ParameterManager',
    'clamp',
]
