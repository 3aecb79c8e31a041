"""Trajectory emitters: receive per-step state and render or record it."""

import sys
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, TextIO, Tuple
import numpy as np
from orbit_sim.physics.body import Body


class TrajectoryEmitter(ABC):
    """Abstract interface for per-step state consumers."""

    @abstractmethod
    def emit(self, elapsed: float, bodies: Sequence[Body]):
        """Receive the state after one step.

        Args:
            elapsed: Elapsed-time label in seconds
            bodies: Full body collection in its current state
        """
        pass

    def close(self):
        """Release any resources held by the emitter."""
        pass


class TabSeparatedWriter(TrajectoryEmitter):
    """Writes one tab-separated line per step, without a header.

    Columns: elapsed, x and y of each tracked body, then the distance
    between the first two tracked bodies. Numbers use %g formatting with
    `precision` significant digits.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        tracked: Tuple[int, ...] = (0, 1),
        precision: int = 6
    ):
        """Initialize writer.

        Args:
            stream: Text stream to write to (defaults to sys.stdout at emit time)
            tracked: Indices of the bodies to report
            precision: Significant digits per number
        """
        if len(tracked) < 1:
            raise ValueError("At least one tracked body is required")
        if precision < 1:
            raise ValueError(f"Precision must be at least 1, got {precision}")
        self.stream = stream
        self.tracked = tuple(tracked)
        self.precision = precision
        self.lines_written = 0

    def format_number(self, value: float) -> str:
        return f"{value:.{self.precision}g}"

    def format_line(self, elapsed: float, bodies: Sequence[Body]) -> str:
        fields = [elapsed]
        for index in self.tracked:
            fields.extend(bodies[index].position)
        if len(self.tracked) >= 2:
            first = bodies[self.tracked[0]].position
            second = bodies[self.tracked[1]].position
            fields.append(np.linalg.norm(first - second))
        return "\t".join(self.format_number(float(value)) for value in fields)

    def emit(self, elapsed: float, bodies: Sequence[Body]):
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(self.format_line(elapsed, bodies) + "\n")
        self.lines_written += 1

    def close(self):
        stream = self.stream if self.stream is not None else sys.stdout
        stream.flush()


class TrajectoryRecorder(TrajectoryEmitter):
    """Keeps the trajectory in memory, e.g. for plotting or comparisons."""

    def __init__(self, tracked: Optional[Tuple[int, ...]] = None):
        """Initialize recorder.

        Args:
            tracked: Indices of the bodies to record (all bodies if None)
        """
        self.tracked = tuple(tracked) if tracked is not None else None
        self.names: Optional[List[str]] = None
        self._times: List[float] = []
        self._positions: List[np.ndarray] = []

    def emit(self, elapsed: float, bodies: Sequence[Body]):
        indices = self.tracked if self.tracked is not None else range(len(bodies))
        if self.names is None:
            self.names = [bodies[i].name for i in indices]
        self._times.append(float(elapsed))
        self._positions.append(np.array([bodies[i].position for i in indices], dtype=np.float64))

    def __len__(self) -> int:
        return len(self._times)

    @property
    def times(self) -> np.ndarray:
        return np.array(self._times, dtype=np.float64)

    @property
    def positions(self) -> np.ndarray:
        """Recorded positions, shape (n_steps, n_tracked, 2)."""
        if not self._positions:
            return np.zeros((0, 0, 2), dtype=np.float64)
        return np.stack(self._positions)

    def distances(self, i: int = 0, j: int = 1) -> np.ndarray:
        """Distance between two recorded bodies at every step."""
        positions = self.positions
        return np.linalg.norm(positions[:, i] - positions[:, j], axis=1)


class MultiEmitter(TrajectoryEmitter):
    """Forwards every step to several emitters."""

    def __init__(self, *emitters: TrajectoryEmitter):
        self.emitters = [emitter for emitter in emitters if emitter is not None]

    def emit(self, elapsed: float, bodies: Sequence[Body]):
        for emitter in self.emitters:
            emitter.emit(elapsed, bodies)

    def close(self):
        for emitter in self.emitters:
            emitter.close()
