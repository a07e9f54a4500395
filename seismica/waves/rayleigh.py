"""
Rayleigh wave model (coupled vertical/longitudinal surface wave).

Particles follow an elliptical path in the y-z plane. The vertical and
longitudinal components share a phase but decay with depth through two
independent exponential rates, q_R and s_R, derived from the longitudinal
and transversal wave numbers of an isotropic elastic medium.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from seismica import defaults
from seismica.errors import ModelValidityError
from seismica.types import WaveParameters, X_INDEX, Y_INDEX, Z_INDEX, W_INDEX

from .base import WaveModel

# Working angular frequency of the model
OMEGA = 2.5

# Unexplained scale factors carried over as-is: coordinates and amplitude are
# multiplied by frequency / RAYLEIGH_SCALE_DIVISOR, and z is further compressed.
RAYLEIGH_SCALE_DIVISOR = 5.0
RAYLEIGH_Z_COMPRESSION = 0.25


@dataclass(frozen=True)
class RayleighMaterial:
    """Isotropic elastic material.

    Valid regime: E > 0, rho > 0 and 0 <= nu < 0.5. In that range the
    approximate Rayleigh factor theta_R is below 1, so the Rayleigh wave
    number exceeds both body-wave numbers and the decay exponents are real.

    Attributes:
        youngs_modulus: E
        density: rho
        poisson_ratio: nu
    """
    youngs_modulus: float = 1.0   # imaginary material
    density: float = 10.0         # imaginary material
    poisson_ratio: float = 0.3

    @property
    def lame_lambda(self) -> float:
        nu = self.poisson_ratio
        return nu * self.youngs_modulus / ((1.0 + nu) * (1.0 - 2.0 * nu))

    @property
    def lame_mu(self) -> float:
        return self.youngs_modulus / (2.0 * (1.0 + self.poisson_ratio))

    @property
    def theta_r(self) -> float:
        """Approximate solution of the Rayleigh dispersion equation."""
        nu = self.poisson_ratio
        return (0.87 + 1.12 * nu) / (1.0 + nu)


def _checked_sqrt(name: str, value: float) -> float:
    if value < 0.0:
        raise ModelValidityError(f"{name} is imaginary: sqrt({value!r})")
    return math.sqrt(value)


class RayleighWaveModel(WaveModel):

    name = "rayleigh"
    display_name = "Rayleigh"
    description = "Coupled vertical/longitudinal surface wave with two decay rates"

    def __init__(
        self,
        parameters: WaveParameters | None = None,
        size: float = defaults.GEOMETRY_SIZE,
        material: RayleighMaterial | None = None,
        omega: float = OMEGA,
    ):
        super().__init__(parameters, size)
        self.material = material if material is not None else RayleighMaterial()
        self.omega = float(omega)

        m = self.material
        if m.youngs_modulus <= 0.0 or m.density <= 0.0:
            raise ModelValidityError(
                f"Elastic modulus and density must be positive, got E={m.youngs_modulus}, rho={m.density}"
            )
        if not 0.0 <= m.poisson_ratio < 0.5:
            raise ModelValidityError(f"Poisson ratio must lie in [0, 0.5), got {m.poisson_ratio}")

        # Wave numbers for longitudinal and transversal waves
        self.c_l = self.omega * math.sqrt(m.density / (m.lame_lambda + 2.0 * m.lame_mu))
        self.c_t = self.omega * math.sqrt(m.density / m.lame_mu)
        # Rayleigh wave number
        self.c = self.c_t / math.sqrt(m.theta_r)

        self.q_r = _checked_sqrt("q_R", self.c * self.c - self.c_l * self.c_l)
        self.s_r = _checked_sqrt("s_R", self.c * self.c - self.c_t * self.c_t)

        c2 = self.c * self.c
        ct2 = self.c_t * self.c_t
        self._coupling_y = 2.0 * self.q_r * self.s_r / ct2
        self._coupling_z = 2.0 * c2 / (2.0 * c2 - ct2)

    def _displacement(self, coords: np.ndarray, t: float, out: np.ndarray) -> None:
        p = self.parameters
        scale = p.frequency / RAYLEIGH_SCALE_DIVISOR
        amplitude = p.amplitude * scale

        y = coords[:, Y_INDEX] * scale
        z = coords[:, Z_INDEX] * scale * RAYLEIGH_Z_COMPRESSION

        depth = self.size / 2.0 * scale - y
        delta = depth / self.size * p.dissipation * 2.0

        decay_q = np.exp(-self.q_r * delta)
        decay_s = np.exp(-self.s_r * delta)
        profile_y = decay_q - self._coupling_y * decay_s
        profile_z = decay_q - self._coupling_z * decay_s

        phi = self.c * z - self.omega * t * p.velocity

        out[:, Y_INDEX] = amplitude * self.c * profile_y * np.cos(phi - np.pi / 2.0)
        out[:, Z_INDEX] = amplitude * self.q_r * profile_z * np.cos(phi)
        out[:, X_INDEX] = 0.0
        out[:, W_INDEX] = 0.0
