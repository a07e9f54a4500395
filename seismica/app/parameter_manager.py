"""Centralized mediation of wave-parameter changes coming from UI controls.

ParameterManager is the single path from slider/button callbacks to the
model registry, providing:
- Validation at the call site (bad values raise immediately)
- A last-value-wins queue, applied between ticks by the render loop
- Optional debouncing per key
- Per-key subscriber notifications (outside the lock)
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TYPE_CHECKING

from seismica import defaults
from seismica.errors import InvalidParameter
from seismica.waves import ModelRegistry

if TYPE_CHECKING:
    from seismica.simulation import Simulator

logger = logging.getLogger(__name__)


class ParameterKey(enum.Enum):
    """Keys for the controls exposed to the UI."""

    AMPLITUDE = "amplitude"
    VELOCITY = "velocity"
    PERIOD = "period"
    DISSIPATION = "dissipation"
    MODEL = "model"


# Slider ranges; MODEL is a button group and has no range
CONTROL_RANGES: dict[ParameterKey, tuple[float, float]] = {
    ParameterKey.AMPLITUDE: (defaults.MIN_AMPLITUDE, defaults.MAX_AMPLITUDE),
    ParameterKey.VELOCITY: (defaults.MIN_VELOCITY, defaults.MAX_VELOCITY),
    ParameterKey.PERIOD: (defaults.MIN_PERIOD, defaults.MAX_PERIOD),
    ParameterKey.DISSIPATION: (defaults.MIN_DISSIPATION, defaults.MAX_DISSIPATION),
}


def clamp(value: float, low: float, high: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameter(f"Cannot clamp non-finite value {value!r}")
    return max(low, min(high, value))


@dataclass
class _PendingEntry:
    """A queued value waiting for the next ``apply_pending()``."""

    value: Any
    timestamp: float
    delay: float


class ParameterManager:
    """Queue UI parameter changes and apply them to the registry between ticks.

    ``update()`` may be called from any thread. It validates the value
    against a scratch copy of the parameters (or against the registry for
    model selection), so an invalid value raises at the caller and is never
    queued. The render loop calls ``apply_pending()`` before evaluating a
    frame; ``attach()`` wires that up as a simulator pre-update hook.
    """

    _SETTERS: dict[ParameterKey, str] = {
        ParameterKey.AMPLITUDE: "set_amplitude",
        ParameterKey.VELOCITY: "set_velocity",
        ParameterKey.PERIOD: "set_period",
        ParameterKey.DISSIPATION: "set_dissipation",
    }

    def __init__(
        self,
        registry: ModelRegistry,
        lock: Optional[threading.RLock] = None,
        *,
        _clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._registry = registry
        self._lock = lock if lock is not None else threading.RLock()
        self._clock = _clock

        self._subscribers: dict[ParameterKey, list[Callable]] = {}
        self._pending: dict[ParameterKey, _PendingEntry] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def update(
        self,
        key: ParameterKey,
        value: Any,
        *,
        debounce: float = defaults.SLIDER_DEBOUNCE_SECONDS,
        clamp_to_range: bool = False,
    ) -> Any:
        """Request a parameter change.

        Args:
            key: Which control changed.
            value: New value. For ``MODEL`` an index or a model name.
            debounce: Seconds the value must stay unchanged before it is
                applied. ``<= 0`` applies on the next ``apply_pending()``.
            clamp_to_range: Clamp numeric values to ``CONTROL_RANGES``.

        Returns:
            The value that was queued (after clamping / name resolution).
        """
        if not isinstance(key, ParameterKey):
            raise InvalidParameter(f"Unknown parameter key: {key!r}")

        if key is ParameterKey.MODEL:
            value = self._validate_model(value)
        else:
            if clamp_to_range:
                low, high = CONTROL_RANGES[key]
                value = clamp(value, low, high)
            self._validate_value(key, value)

        with self._lock:
            self._pending[key] = _PendingEntry(
                value=value,
                timestamp=self._clock(),
                delay=max(0.0, float(debounce)),
            )
        return value

    def apply_pending(self) -> list[ParameterKey]:
        """Apply queued values whose debounce delay has elapsed.

        Returns the keys that were applied.
        """
        return self._apply(force=False)

    def flush_pending(self) -> list[ParameterKey]:
        """Apply every queued value immediately, ignoring debounce delays."""
        return self._apply(force=True)

    def has_pending(self) -> bool:
        with self._lock:
            return bool(self._pending)

    def current(self, key: ParameterKey) -> Any:
        """Value currently in effect (not including queued changes)."""
        with self._lock:
            params = self._registry.parameters
            if key is ParameterKey.MODEL:
                return self._registry.active_index
            if key is ParameterKey.PERIOD:
                return params.period
            return getattr(params, key.value)

    def subscribe(self, key: ParameterKey, callback: Callable) -> None:
        """Register *callback* for notifications when *key* is applied.

        Callback signature: ``(key, value)``.
        """
        self._subscribers.setdefault(key, []).append(callback)

    def unsubscribe(self, key: ParameterKey, callback: Callable) -> None:
        """Remove a previously registered callback."""
        callbacks = self._subscribers.get(key)
        if callbacks:
            try:
                callbacks.remove(callback)
            except ValueError:
                pass

    def attach(self, simulator: Simulator) -> None:
        """Apply pending changes at the start of every simulator update."""
        simulator.add_pre_update_hook(self.apply_pending)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _validate_model(self, value: Any) -> int:
        if isinstance(value, str):
            return self._registry.index_of(value)
        self._registry.get(value)
        return int(value)

    def _validate_value(self, key: ParameterKey, value: Any) -> None:
        with self._lock:
            scratch = dataclasses.replace(self._registry.parameters)
        getattr(scratch, self._SETTERS[key])(value)

    def _apply(self, *, force: bool) -> list[ParameterKey]:
        with self._lock:
            if not self._pending:
                return []
            now = self._clock()
            ready = [
                (key, entry)
                for key, entry in self._pending.items()
                if force or now - entry.timestamp >= entry.delay
            ]
            for key, entry in ready:
                del self._pending[key]
                self._set(key, entry.value)

        # Notify subscribers (outside lock to avoid deadlocks).
        for key, entry in ready:
            self._notify(key, entry.value)

        if ready:
            logger.debug("Applied parameter changes: %s", [key.value for key, _ in ready])
        return [key for key, _ in ready]

    def _set(self, key: ParameterKey, value: Any) -> None:
        if key is ParameterKey.MODEL:
            self._registry.select_model(value)
        else:
            getattr(self._registry, self._SETTERS[key])(value)

    def _notify(self, key: ParameterKey, value: Any) -> None:
        """Call all subscribers registered for *key*, isolating exceptions."""
        callbacks = self._subscribers.get(key)
        if not callbacks:
            return
        for cb in list(callbacks):
            try:
                cb(key, value)
            except Exception:
                logger.warning(
                    "Subscriber %r raised for %s", cb, key, exc_info=True,
                )
