"""Seismica: analytic seismic surface-wave displacement on a deforming box grid."""

from seismica.errors import (
    InvalidModelIndex,
    InvalidParameter,
    ModelValidityError,
    SeismicaError,
)
from seismica.grid import FaceOrientation, GeometryPreset, GridFace, build_box_faces
from seismica.simulation import Simulator
from seismica.types import WaveParameters
from seismica.waves import ModelRegistry, WaveModel, build_default_registry

__all__ = [
    'FaceOrientation',
    'GeometryPreset',
    'GridFace',
    'InvalidModelIndex',
    'InvalidParameter',
    'ModelRegistry',
    'ModelValidityError',
    'SeismicaError',
    'Simulator',
    'WaveModel',
    'WaveParameters',
    'build_box_faces',
    'build_default_registry',
]
