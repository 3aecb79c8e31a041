"""Output of simulation trajectories."""

from orbit_sim.io.trajectory_writer import (
    TrajectoryEmitter,
    TabSeparatedWriter,
    TrajectoryRecorder,
    MultiEmitter,
)

__all__ = ["TrajectoryEmitter", "TabSeparatedWriter", "TrajectoryRecorder", "MultiEmitter"]
