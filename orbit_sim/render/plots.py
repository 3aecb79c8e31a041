"""Static trajectory plots written to image files with matplotlib."""

from pathlib import Path
from typing import Dict, Optional, Tuple
from matplotlib.figure import Figure
from orbit_sim.io.trajectory_writer import TrajectoryRecorder


def _save(fig: Figure, output_path: str) -> Path:
    output_path = Path(output_path)
    if output_path.parent and not output_path.parent.exists():
        output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path)
    return output_path


def plot_trajectories(
    recorder: TrajectoryRecorder,
    output_path: str,
    title: Optional[str] = None,
    figsize: Tuple[int, int] = (8, 8),
    dpi: int = 100
) -> Path:
    """Plot the x/y path of every recorded body.

    Args:
        recorder: Recorder filled by a simulation run
        output_path: Image file to write (format from the suffix)
        title: Optional plot title
        figsize: Figure size (width, height)
        dpi: Dots per inch

    Returns:
        Path of the written file
    """
    if len(recorder) == 0:
        raise ValueError("No trajectory recorded")

    positions = recorder.positions
    names = recorder.names or [f"body {i}" for i in range(positions.shape[1])]

    fig = Figure(figsize=figsize, dpi=dpi)
    ax = fig.add_subplot(1, 1, 1)
    for index, name in enumerate(names):
        ax.plot(positions[:, index, 0], positions[:, index, 1], label=name, linewidth=0.8)
    ax.set_aspect('equal', adjustable='datalim')
    ax.set_xlabel('x (m)')
    ax.set_ylabel('y (m)')
    ax.set_title(title or 'Trajectories')
    ax.grid(True, alpha=0.3)
    ax.legend()

    return _save(fig, output_path)


def plot_distances(
    recorders: Dict[str, TrajectoryRecorder],
    output_path: str,
    i: int = 0,
    j: int = 1,
    figsize: Tuple[int, int] = (10, 5),
    dpi: int = 100
) -> Path:
    """Plot the distance between two bodies over time for several runs.

    Args:
        recorders: Mapping of label (e.g. integrator name) to recorder
        output_path: Image file to write
        i: Index of the first recorded body
        j: Index of the second recorded body

    Returns:
        Path of the written file
    """
    if not recorders:
        raise ValueError("No recorders to plot")

    fig = Figure(figsize=figsize, dpi=dpi)
    ax = fig.add_subplot(1, 1, 1)
    for label, recorder in recorders.items():
        ax.plot(recorder.times, recorder.distances(i, j), label=label, linewidth=0.8)
    ax.set_xlabel('time (s)')
    ax.set_ylabel('distance (m)')
    ax.set_title('Distance between bodies')
    ax.grid(True, alpha=0.3)
    ax.legend()

    return _save(fig, output_path)
