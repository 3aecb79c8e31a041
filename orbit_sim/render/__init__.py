"""Plotting of recorded trajectories."""

from orbit_sim.render.plots import plot_trajectories, plot_distances

__all__ = ["plot_trajectories", "plot_distances"]
