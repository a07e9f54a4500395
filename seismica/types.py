"""Core data types for seismica - renderer-agnostic."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from seismica import defaults
from seismica.errors import InvalidParameter

# Coordinate layout: (x, y, z, w), w is padding for the vertex buffer stride
X_INDEX = 0
Y_INDEX = 1
Z_INDEX = 2
W_INDEX = 3
COORD_SIZE = 4
COORD_DTYPE = np.float32


def as_coordinates(coord) -> np.ndarray:
    """Return *coord* as a float32 array whose last axis holds (x, y, z, w)."""
    arr = np.asarray(coord, dtype=COORD_DTYPE)
    if arr.shape[-1:] != (COORD_SIZE,):
        raise InvalidParameter(
            f"Coordinates must have a trailing axis of size {COORD_SIZE}, got shape {arr.shape}"
        )
    return arr


def _require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value!r}")
    return value


@dataclass
class WaveParameters:
    """Wave parameters shared by every model in a registry.

    Attributes:
        amplitude: Peak displacement (>= 0)
        velocity: Signed multiplier on time in the phase term
        frequency: Inverse of the user-facing period, stored once at assignment
        dissipation: Exponential decay rate with depth (negative amplifies)
    """
    amplitude: float = defaults.INITIAL_AMPLITUDE
    velocity: float = defaults.INITIAL_VELOCITY
    frequency: float = 1.0 / defaults.INITIAL_PERIOD
    dissipation: float = defaults.INITIAL_DISSIPATION

    @classmethod
    def from_period(
        cls,
        amplitude: float = defaults.INITIAL_AMPLITUDE,
        velocity: float = defaults.INITIAL_VELOCITY,
        period: float = defaults.INITIAL_PERIOD,
        dissipation: float = defaults.INITIAL_DISSIPATION,
    ) -> WaveParameters:
        params = cls()
        params.set_amplitude(amplitude)
        params.set_velocity(velocity)
        params.set_period(period)
        params.set_dissipation(dissipation)
        return params

    @classmethod
    def from_defaults(cls) -> WaveParameters:
        return cls.from_period()

    @property
    def period(self) -> float:
        """User-facing period recovered from the stored frequency."""
        return 1.0 / self.frequency

    def set_amplitude(self, amplitude: float) -> None:
        amplitude = _require_finite("amplitude", amplitude)
        if amplitude < 0.0:
            raise InvalidParameter(f"amplitude must be >= 0, got {amplitude!r}")
        self.amplitude = amplitude

    def set_velocity(self, velocity: float) -> None:
        self.velocity = _require_finite("velocity", velocity)

    def set_period(self, period: float) -> None:
        """Store the inverse of *period*; zero is rejected rather than clamped."""
        period = _require_finite("period", period)
        if period == 0.0:
            raise InvalidParameter("period must be non-zero")
        self.frequency = 1.0 / period

    def set_dissipation(self, dissipation: float) -> None:
        self.dissipation = _require_finite("dissipation", dissipation)
