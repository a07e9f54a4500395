"""
Render a still of the deformed box at a given time.

The three faces are drawn with their triangle index buffers (filled) and
line index buffers (outline), i.e. exactly what a GPU consumer would receive
from the simulator.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from seismica import defaults
from seismica.grid import GeometryPreset
from seismica.simulation import Simulator
from seismica.types import X_INDEX, Y_INDEX, Z_INDEX

FACE_COLOR = (0.9, 0.9, 0.9)
OUTLINE_COLOR = (0.1, 0.1, 0.1)


def render_snapshot(simulator: Simulator, t: float, output_path: Path) -> None:
    simulator.update(t)

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(projection="3d")

    for face in simulator.faces:
        pos = face.positions
        # matplotlib's vertical axis is z; the simulation's is y
        xs, ys, zs = pos[:, X_INDEX], pos[:, Z_INDEX], pos[:, Y_INDEX]
        ax.plot_trisurf(
            xs, ys, zs,
            triangles=face.triangle_indices.reshape(-1, 3).astype(int),
            color=FACE_COLOR,
            shade=True,
            linewidth=0.0,
        )
        segments = pos[face.line_indices.reshape(-1, 2)][:, :, [X_INDEX, Z_INDEX, Y_INDEX]]
        ax.add_collection3d(Line3DCollection(segments, colors=[OUTLINE_COLOR], linewidths=0.4))

    ax.set_box_aspect((1.0, defaults.SIDE_DEPTH_FACTOR, 1.0))
    ax.set_axis_off()
    ax.set_title(f"{simulator.model.display_name} wave, t = {t:.2f}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved preview to {output_path}")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--model", choices=["null", "love", "rayleigh"], default=defaults.DEFAULT_MODEL)
    parser.add_argument("--time", type=float, default=0.0)
    parser.add_argument("--amplitude", type=float, default=defaults.INITIAL_AMPLITUDE)
    parser.add_argument("--velocity", type=float, default=defaults.INITIAL_VELOCITY)
    parser.add_argument("--period", type=float, default=defaults.INITIAL_PERIOD)
    parser.add_argument("--dissipation", type=float, default=defaults.INITIAL_DISSIPATION)
    parser.add_argument("--resolution", type=int, default=12)
    parser.add_argument("--preset", choices=[p.value for p in GeometryPreset], default=GeometryPreset.ANCHORED.value)
    parser.add_argument("--output", type=Path, default=Path("renders/wavefield.png"))
    args = parser.parse_args()

    simulator = Simulator.from_defaults(
        preset=GeometryPreset(args.preset),
        resolution=args.resolution,
    )
    simulator.registry.select_model_by_name(args.model)
    simulator.set_amplitude(args.amplitude)
    simulator.set_velocity(args.velocity)
    simulator.set_period(args.period)
    simulator.set_dissipation(args.dissipation)

    render_snapshot(simulator, args.time, args.output)


if __name__ == "__main__":
    main()
