"""
Registry of the available wave models.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

import numpy as np

from seismica.errors import InvalidModelIndex, InvalidParameter
from seismica.types import WaveParameters

from .base import WaveModel

logger = logging.getLogger(__name__)


class ModelRegistry:
    """
    Ordered, fixed set of wave models with one active selection.

    The registry owns the canonical WaveParameters; every model is rebound to
    it on construction, so parameter setters reach all models at once and an
    inactive model is always in sync when it becomes active.
    """

    def __init__(
        self,
        models: Sequence[WaveModel],
        parameters: WaveParameters | None = None,
        active: int | str = 0,
    ):
        if not models:
            raise InvalidParameter("ModelRegistry needs at least one model")

        names = [model.name for model in models]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise InvalidParameter(f"Wave model names must be unique, duplicated: {duplicates}")

        self._parameters = parameters if parameters is not None else models[0].parameters
        self._models: tuple[WaveModel, ...] = tuple(models)
        for model in self._models:
            model.parameters = self._parameters

        self._active = 0
        if isinstance(active, str):
            active = self.index_of(active)
        self.select_model(active)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def parameters(self) -> WaveParameters:
        return self._parameters

    @property
    def active(self) -> WaveModel:
        """The currently active model."""
        return self._models[self._active]

    @property
    def active_index(self) -> int:
        return self._active

    @property
    def active_name(self) -> str:
        return self.active.name

    def get(self, key: int | str) -> WaveModel:
        """Get a model by position or by name."""
        if isinstance(key, str):
            return self._models[self.index_of(key)]
        return self._models[self._check_index(key)]

    def index_of(self, name: str) -> int:
        for i, model in enumerate(self._models):
            if model.name == name:
                return i
        raise InvalidModelIndex(f"Unknown wave model: {name}. Available: {self.list_available()}")

    def list_available(self) -> list[str]:
        """List all model names in registry order."""
        return [model.name for model in self._models]

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[WaveModel]:
        return iter(self._models)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_model(self, index: int) -> WaveModel:
        """Make the model at *index* active."""
        self._active = self._check_index(index)
        logger.info("Active wave model: %s", self.active.name)
        return self.active

    def select_model_by_name(self, name: str) -> WaveModel:
        return self.select_model(self.index_of(name))

    def _check_index(self, index: int) -> int:
        # bool is an int subclass but never a meaningful model index
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise InvalidModelIndex(f"Model index must be an int, got {index!r}")
        if not 0 <= index < len(self._models):
            raise InvalidModelIndex(
                f"Model index {index} out of range for {len(self._models)} models"
            )
        return int(index)

    # ------------------------------------------------------------------
    # Parameter fan-out
    # ------------------------------------------------------------------

    def set_amplitude(self, amplitude: float) -> None:
        self._parameters.set_amplitude(amplitude)

    def set_velocity(self, velocity: float) -> None:
        self._parameters.set_velocity(velocity)

    def set_period(self, period: float) -> None:
        self._parameters.set_period(period)

    def set_dissipation(self, dissipation: float) -> None:
        self._parameters.set_dissipation(dissipation)
