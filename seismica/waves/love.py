"""
Love wave model (shear-horizontal surface wave).

Displacement is confined to the x axis, transverse to propagation along z,
and decays exponentially with depth below the top of the domain:

    u_x = A exp(-d (size/2 - y) / size) cos(k z - v t)

Points above the nominal surface have negative depth and are amplified.
"""

import numpy as np

from seismica.types import X_INDEX, Y_INDEX, Z_INDEX

from .base import WaveModel


class LoveWaveModel(WaveModel):

    name = "love"
    display_name = "Love"
    description = "Shear-horizontal surface wave, x displacement decaying with depth"

    def _displacement(self, coords: np.ndarray, t: float, out: np.ndarray) -> None:
        p = self.parameters
        depth = self.size / 2.0 - coords[:, Y_INDEX]
        delta = depth / self.size

        out[:, X_INDEX] = p.amplitude * np.exp(-p.dissipation * delta) * np.cos(
            p.frequency * coords[:, Z_INDEX] - p.velocity * t
        )
