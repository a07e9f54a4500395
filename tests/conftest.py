"""Test configuration for seismica."""

import pytest

from seismica.grid import build_box_faces
from seismica.simulation import Simulator
from seismica.types import WaveParameters
from seismica.waves import build_default_registry


@pytest.fixture
def parameters():
    """Unit wave with no decay: amplitude 1, velocity 1, period 1, dissipation 0."""
    return WaveParameters.from_period(amplitude=1.0, velocity=1.0, period=1.0, dissipation=0.0)


@pytest.fixture
def registry(parameters):
    return build_default_registry(parameters, size=1.0)


@pytest.fixture
def faces():
    return build_box_faces(origin=(-0.5, -0.5, -2.5), size=1.0, resolution=4)


@pytest.fixture
def simulator(registry, faces):
    return Simulator(registry, faces)
