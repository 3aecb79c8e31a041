"""Run both integrators on the Earth-Moon system and plot the results."""

from orbit_sim import Simulator, IntegrationMethod
from orbit_sim.io import TrajectoryRecorder
from orbit_sim.presets import EarthMoon
from orbit_sim.render import plot_trajectories, plot_distances


def main():
    """Compare naive and symplectic Euler over one simulated year."""
    bodies = EarthMoon().generate()
    recorders = {}

    for method in (IntegrationMethod.NAIVE, IntegrationMethod.SYMPLECTIC):
        sim = Simulator(bodies, method)
        recorder = TrajectoryRecorder()
        initial_energy = sim.get_energy()

        sim.run(emitter=recorder)

        drift = sim.diagnostics.energy_drift(sim.get_energy(), initial_energy)
        print(f"{method.value}: energy drift after one year = {drift * 100:.3f}%")

        plot_trajectories(recorder, f"trajectories_{method.value}.png",
                          title=f"{method.value} integration")
        recorders[method.value] = recorder

    plot_distances(recorders, "distances.png")
    print("Plots written: trajectories_naive.png, trajectories_symplectic.png, distances.png")


if __name__ == "__main__":
    main()
