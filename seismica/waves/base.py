"""
Base classes for wave displacement models.
"""

from __future__ import annotations

import numpy as np

from seismica import defaults
from seismica.errors import InvalidParameter
from seismica.types import WaveParameters, as_coordinates


class WaveModel:
    """
    Closed-form displacement field u(coord, t).

    Models do not own their parameters: they keep a reference to the
    WaveParameters shared through the registry, so a setter called on any
    model is visible to all of them.

    Subclasses override ``_displacement`` and receive a float64 view of the
    coordinates with shape (N, 4).
    """

    name: str = "base"
    display_name: str = "Base"
    description: str = ""

    def __init__(self, parameters: WaveParameters | None = None, size: float = defaults.GEOMETRY_SIZE):
        if not size > 0.0:
            raise InvalidParameter(f"size must be positive, got {size!r}")
        self.parameters = parameters if parameters is not None else WaveParameters.from_defaults()
        self.size = float(size)

    # ------------------------------------------------------------------
    # Parameter setters
    # ------------------------------------------------------------------

    def set_amplitude(self, amplitude: float) -> None:
        self.parameters.set_amplitude(amplitude)

    def set_velocity(self, velocity: float) -> None:
        self.parameters.set_velocity(velocity)

    def set_period(self, period: float) -> None:
        self.parameters.set_period(period)

    def set_dissipation(self, dissipation: float) -> None:
        self.parameters.set_dissipation(dissipation)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, coord, t: float) -> np.ndarray:
        """
        Displacement at *coord* and time *t*.

        Args:
            coord: A single coordinate (4,) or an array of coordinates (N, 4)
            t: Elapsed simulation time

        Returns:
            float32 array with the same shape as *coord*; w is always 0
        """
        coords = as_coordinates(coord)
        flat = coords.reshape(-1, coords.shape[-1]).astype(np.float64)
        out = np.zeros_like(flat)
        self._displacement(flat, float(t), out)
        return out.astype(coords.dtype, copy=False).reshape(coords.shape)

    def _displacement(self, coords: np.ndarray, t: float, out: np.ndarray) -> None:
        """Fill *out* (zeroed, shape (N, 4)) with the displacement field."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(parameters={self.parameters!r}, size={self.size})"


class NullWaveModel(WaveModel):
    """Zero displacement everywhere; the resting grid."""

    name = "null"
    display_name = "None"
    description = "No displacement"

    def _displacement(self, coords: np.ndarray, t: float, out: np.ndarray) -> None:
        return None
