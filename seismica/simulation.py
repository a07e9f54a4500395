"""Per-tick evaluation of the active wave model over every face of the box."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Protocol, Sequence

import numpy as np

from seismica import defaults
from seismica.grid import GeometryPreset, GridFace, build_box_faces
from seismica.types import W_INDEX
from seismica.waves import ModelRegistry, WaveModel, build_default_registry

logger = logging.getLogger(__name__)


class VertexSink(Protocol):
    """Consumer of updated vertex data (e.g. a GPU buffer uploader)."""

    def upload(self, face: GridFace) -> None:
        ...


class Simulator:
    """Apply the active displacement field to each face once per tick.

    ``update(t)`` is a pure map over lattice points: each output vertex is
    ``base + model.evaluate(base, t)`` with w pinned to 0, and no point depends
    on another. Faces are processed in order and each sink sees a face only
    after all of its vertices are written.

    Parameter changes are expected between ticks. Callables registered with
    ``add_pre_update_hook`` run at the start of every ``update`` and are the
    place to flush queued UI changes.
    """

    def __init__(
        self,
        registry: ModelRegistry,
        faces: Sequence[GridFace],
        sinks: Iterable[VertexSink] = (),
    ) -> None:
        self.registry = registry
        self._faces: tuple[GridFace, ...] = tuple(faces)
        self._sinks: list[VertexSink] = list(sinks)
        self._pre_update_hooks: list[Callable[[], None]] = []
        self._time: float = 0.0

    @classmethod
    def from_defaults(
        cls,
        preset: GeometryPreset = GeometryPreset.ANCHORED,
        resolution: int = defaults.GEOMETRY_RESOLUTION,
        sinks: Iterable[VertexSink] = (),
    ) -> Simulator:
        """Default model set on the default box geometry."""
        registry = build_default_registry(size=defaults.GEOMETRY_SIZE)
        if preset is GeometryPreset.CENTERED:
            origin = defaults.GEOMETRY_CENTER
        else:
            origin = defaults.GEOMETRY_ORIGIN
        faces = build_box_faces(
            origin=origin,
            size=defaults.GEOMETRY_SIZE,
            resolution=resolution,
            preset=preset,
        )
        return cls(registry, faces, sinks)

    # ------------------------------------------------------------------
    # Faces and sinks
    # ------------------------------------------------------------------

    @property
    def faces(self) -> tuple[GridFace, ...]:
        return self._faces

    def face(self, name: str) -> GridFace:
        for face in self._faces:
            if face.name == name:
                return face
        raise KeyError(f"No face named {name!r}. Available: {[f.name for f in self._faces]}")

    def add_sink(self, sink: VertexSink) -> None:
        self._sinks.append(sink)

    def add_pre_update_hook(self, hook: Callable[[], None]) -> None:
        self._pre_update_hooks.append(hook)

    # ------------------------------------------------------------------
    # Model and parameters
    # ------------------------------------------------------------------

    @property
    def model(self) -> WaveModel:
        return self.registry.active

    def set_model(self, index: int) -> None:
        self.registry.select_model(index)

    def set_amplitude(self, amplitude: float) -> None:
        self.registry.set_amplitude(amplitude)

    def set_velocity(self, velocity: float) -> None:
        self.registry.set_velocity(velocity)

    def set_period(self, period: float) -> None:
        self.registry.set_period(period)

    def set_dissipation(self, dissipation: float) -> None:
        self.registry.set_dissipation(dissipation)

    # ------------------------------------------------------------------
    # Time stepping
    # ------------------------------------------------------------------

    @property
    def current_time(self) -> float:
        return self._time

    def reset_time(self, t: float = 0.0) -> None:
        self._time = float(t)

    def advance(self, delta_time: float) -> float:
        """Accumulate *delta_time* onto the simulation clock and update."""
        self._time += float(delta_time)
        self.update(self._time)
        return self._time

    def update(self, t: float) -> None:
        """Write the displaced vertices of every face for time *t*."""
        for hook in self._pre_update_hooks:
            hook()

        model = self.registry.active
        for face in self._faces:
            displacement = model.evaluate(face.base, t)
            np.add(face.base, displacement, out=face.positions)
            face.positions[:, W_INDEX] = 0.0
            for sink in self._sinks:
                sink.upload(face)

        logger.debug("Updated %d faces at t=%.4f with %s", len(self._faces), t, model.name)

    def snapshot(self, t: Optional[float] = None) -> dict[str, np.ndarray]:
        """Copies of the current positions by face name, optionally after updating to *t*."""
        if t is not None:
            self.update(t)
        return {face.name: face.positions.copy() for face in self._faces}
