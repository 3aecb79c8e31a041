"""CLI main entry point."""

import argparse
import sys
from dataclasses import asdict
from orbit_sim.io.trajectory_writer import TabSeparatedWriter, TrajectoryRecorder, MultiEmitter
from orbit_sim.physics.force_calculator import CoincidentBodiesError
from orbit_sim.physics.integrators.method import IntegrationMethod
from orbit_sim.physics.simulator import Simulator
from orbit_sim.presets import PRESETS
from orbit_sim.render.plots import plot_trajectories
from orbit_sim.utils.config import Config, load_config

USAGE_MESSAGE = "Give as argument to the program the integration method: naive or symplectic"
METHOD_ERROR_MESSAGE = "The integration method can only be: naive or symplectic"


class UsageErrorParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(USAGE_MESSAGE, file=sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageErrorParser(
        prog="orbit-sim",
        description="Earth-Moon gravity simulation with naive or symplectic Euler integration. "
                    "Writes one tab-separated line per step: time, x/y of two bodies, distance."
    )
    parser.add_argument('method', type=str,
                        help='Integration method: naive or symplectic')

    parser.add_argument('--config', type=str, default=None,
                        help='JSON or YAML configuration file')
    parser.add_argument('--preset', type=str, default=None,
                        choices=sorted(PRESETS.keys()),
                        help='Initial conditions preset (default: earth_moon)')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of simulation steps (default: 8760, one year of hours)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step in seconds (default: 3600)')
    parser.add_argument('--plot', type=str, default=None,
                        help='Write a trajectory plot to this image file')
    parser.add_argument('--verbose', action='store_true',
                        help='Print a run summary to stderr')
    return parser


def build_config(args) -> Config:
    """Merge the config file (if any) with command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    fields = asdict(config)
    fields['method'] = args.method
    if args.preset is not None:
        fields['preset'] = args.preset
        fields['bodies'] = None
    if args.steps is not None:
        fields['steps'] = args.steps
    if args.dt is not None:
        fields['dt'] = args.dt
    if args.plot is not None:
        fields['plot_path'] = args.plot
    return Config(**fields)


def run_simulation(config: Config, verbose: bool = False) -> Simulator:
    """Run a simulation, writing the trajectory to stdout."""
    bodies = config.build_bodies()
    sim = Simulator(
        bodies,
        config.integration_method,
        dt=config.dt,
        G=config.G,
        verbose=verbose
    )

    writer = TabSeparatedWriter(tracked=tuple(config.tracked), precision=config.precision)
    recorder = TrajectoryRecorder(tracked=tuple(config.tracked)) if config.plot_path else None
    emitter = MultiEmitter(writer, recorder)

    sim.run(config.steps, emitter)
    emitter.close()

    if recorder is not None:
        path = plot_trajectories(recorder, config.plot_path,
                                 title=f"{sim.integrator.name} integration")
        if verbose:
            print(f"Plot saved to {path}", file=sys.stderr)

    return sim


def main(argv=None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        IntegrationMethod.from_name(args.method)
    except ValueError:
        print(METHOD_ERROR_MESSAGE, file=sys.stderr)
        sys.exit(1)

    try:
        config = build_config(args)
        run_simulation(config, verbose=args.verbose)
    except (OSError, TypeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except CoincidentBodiesError as e:
        print(f"Simulation aborted: {e}", file=sys.stderr)
        sys.exit(1)

    return 0


if __name__ == '__main__':
    sys.exit(main())
