"""Tests for seismica.simulation."""

import math

import numpy as np
import pytest

from seismica.grid import GeometryPreset
from seismica.simulation import Simulator
from seismica.types import WaveParameters
from seismica.waves import build_default_registry


class RecordingSink:
    """Collects the faces handed over after each update."""

    def __init__(self):
        self.uploads = []

    def upload(self, face):
        self.uploads.append((face.name, face.vertex_data().copy()))


class TestUpdate:

    def test_zero_amplitude_leaves_base(self, faces):
        params = WaveParameters.from_period(amplitude=0.0, velocity=1.0, period=1.0, dissipation=1.0)
        for name in ("love", "rayleigh"):
            sim = Simulator(build_default_registry(params, size=1.0, active=name), faces)
            sim.update(0.0)
            for face in sim.faces:
                assert np.array_equal(face.positions, face.base)

    def test_null_model_leaves_base(self, simulator):
        simulator.set_model(0)
        simulator.update(12.5)
        for face in simulator.faces:
            assert np.array_equal(face.positions, face.base)

    def test_love_top_face(self, simulator):
        """The top face sits at depth 0, so x shifts by cos(z - t)."""
        t = 0.4
        simulator.update(t)
        top = simulator.face("top")
        expected = top.base.astype(np.float64)
        expected[:, 0] += np.cos(expected[:, 2] - t)
        np.testing.assert_allclose(top.positions, expected, atol=1e-6)

    def test_matches_model_evaluation(self, simulator):
        simulator.set_model(2)
        simulator.set_amplitude(0.3)
        t = 1.7
        simulator.update(t)
        for face in simulator.faces:
            expected = face.base + simulator.model.evaluate(face.base, t)
            np.testing.assert_allclose(face.positions, expected, atol=1e-6)

    def test_w_stays_zero(self, simulator):
        simulator.set_model(2)
        simulator.update(3.0)
        for face in simulator.faces:
            assert not face.positions[:, 3].any()

    def test_base_untouched(self, simulator):
        before = [face.base.copy() for face in simulator.faces]
        simulator.update(2.0)
        for face, base in zip(simulator.faces, before):
            assert np.array_equal(face.base, base)

    def test_parameter_change_between_ticks(self, simulator):
        simulator.update(0.0)
        first = simulator.face("top").positions.copy()
        simulator.set_amplitude(0.0)
        simulator.update(0.0)
        assert not np.array_equal(first, simulator.face("top").positions)
        assert np.array_equal(simulator.face("top").positions, simulator.face("top").base)


class TestSinks:

    def test_each_face_uploaded_in_order(self, simulator):
        sink = RecordingSink()
        simulator.add_sink(sink)
        simulator.update(0.5)
        assert [name for name, _ in sink.uploads] == ["top", "left", "front"]

    def test_upload_sees_finished_face(self, registry, faces):
        sink = RecordingSink()
        sim = Simulator(registry, faces, sinks=[sink])
        sim.update(0.5)
        for (name, data), face in zip(sink.uploads, sim.faces):
            assert np.array_equal(data, face.vertex_data())


class TestClock:

    def test_advance_accumulates(self, simulator):
        simulator.advance(0.25)
        assert simulator.advance(0.75) == pytest.approx(1.0)
        assert simulator.current_time == pytest.approx(1.0)

    def test_advance_equals_update(self, registry, faces):
        stepped = Simulator(registry, faces)
        for _ in range(4):
            stepped.advance(0.25)
        result = {name: arr for name, arr in stepped.snapshot().items()}
        expected = Simulator(registry, faces).snapshot(1.0)
        for name in expected:
            np.testing.assert_allclose(result[name], expected[name], atol=1e-6)

    def test_reset_time(self, simulator):
        simulator.advance(3.0)
        simulator.reset_time()
        assert simulator.current_time == 0.0

    def test_love_periodic_in_time(self, simulator):
        simulator.set_velocity(2.0)
        a = simulator.snapshot(0.3)
        b = simulator.snapshot(0.3 + 2.0 * math.pi / 2.0)
        for name in a:
            np.testing.assert_allclose(a[name], b[name], atol=1e-5)


class TestHooksAndLookup:

    def test_pre_update_hook_runs_first(self, simulator):
        calls = []
        simulator.add_pre_update_hook(lambda: simulator.set_amplitude(0.0) or calls.append(1))
        simulator.update(0.0)
        assert calls == [1]
        for face in simulator.faces:
            assert np.array_equal(face.positions, face.base)

    def test_unknown_face(self, simulator):
        with pytest.raises(KeyError):
            simulator.face("bottom")

    def test_from_defaults(self):
        sim = Simulator.from_defaults(preset=GeometryPreset.CENTERED, resolution=5)
        assert [f.shape for f in sim.faces] == [(25, 5), (25, 5), (5, 5)]
        assert sim.model.name == "love"
        sim.advance(0.1)

    @pytest.mark.parametrize("preset", list(GeometryPreset))
    def test_from_defaults_box_placement(self, preset):
        """Both presets put the same box in space, with the top face at y = size/2."""
        sim = Simulator.from_defaults(preset=preset, resolution=4)
        top, left, front = sim.faces
        np.testing.assert_allclose(top.base[:, 1], 0.5)
        np.testing.assert_allclose(left.base[:, 0], -0.5)
        np.testing.assert_allclose(front.base[:, 2], 2.5)
        np.testing.assert_allclose([top.base[:, 2].min(), top.base[:, 2].max()], [-2.5, 2.5])

    @pytest.mark.parametrize("preset", list(GeometryPreset))
    def test_from_defaults_top_face_undamped(self, preset):
        """The top face sits at depth 0, so dissipation does not shrink its displacement."""
        sim = Simulator.from_defaults(preset=preset, resolution=4)
        sim.set_amplitude(0.2)
        sim.set_dissipation(5.0)
        sim.set_velocity(0.0)
        sim.set_period(1.0)
        sim.update(0.0)
        top = sim.face("top")
        expected = 0.2 * np.cos(top.base[:, 2].astype(np.float64))
        np.testing.assert_allclose(top.positions[:, 0] - top.base[:, 0], expected, atol=1e-6)
