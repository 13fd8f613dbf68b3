"""
Main entry point for rigid-body kinematics simulation.

Run with: python -m sixdof.main

Examples:
    python -m sixdof.main                      # Run all scenarios
    python -m sixdof.main --scenario spin
    python -m sixdof.main --scenario thrust --t-final 5
    python -m sixdof.main --scenario tumble --dt 0.001
    python -m sixdof.main --config run.json    # Load settings from JSON
    python -m sixdof.main --no-plot            # Run without showing plots
"""

from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from sixdof.config import FullConfig, load_config_from_args, save_config
from sixdof.log import print_statistics
from sixdof.plots import (
    plot_3d_path,
    plot_euler_time,
    plot_pos_time,
    plot_rates,
    plot_velocity_body,
)
from sixdof.sim import run_constant_wrench, run_free_spin, run_tumble_test
from sixdof.types import SimLog


def _banner(text: str) -> None:
    print("\n" + "=" * 60)
    print(text)
    print("=" * 60)


def run_spin(cfg: FullConfig, show_plots: bool = True) -> SimLog:
    """Run torque-free spin about the body z axis."""
    _banner("TORQUE-FREE SPIN")
    print("Initial rates: [0, 0, 60] deg/s, no force, no torque")

    log = run_free_spin(
        cfg.vehicle,
        rates=np.deg2rad([0.0, 0.0, 60.0]),
        t_final=cfg.run.t_final,
        options=cfg.options,
        verbose=cfg.run.verbose,
    )
    print_statistics(log, "Spin")

    if show_plots:
        plot_euler_time(log, "Spin: Euler Angles")
        plot_rates(log, "Spin: Body Rates")

    return log


def run_thrust(cfg: FullConfig, show_plots: bool = True) -> SimLog:
    """Run constant forward force with a small pitching torque."""
    _banner("CONSTANT THRUST")
    force = np.array([cfg.vehicle.mass * 1.0, 0.0, 0.0])
    torque = np.array([0.0, 0.01, 0.0])
    print(f"Force: {force} N, torque: {torque} N·m (body frame)")

    log = run_constant_wrench(
        cfg.vehicle,
        force=force,
        torque=torque,
        t_final=cfg.run.t_final,
        options=cfg.options,
        verbose=cfg.run.verbose,
    )
    print_statistics(log, "Constant Thrust")

    if show_plots:
        plot_3d_path(log, "Thrust: 3D Path")
        plot_pos_time(log, "Thrust: Position vs Time")
        plot_velocity_body(log, "Thrust: Body Velocity")
        plot_euler_time(log, "Thrust: Euler Angles")

    return log


def run_tumble(cfg: FullConfig, show_plots: bool = True) -> SimLog:
    """Run intermediate-axis spin on a fixed asymmetric body."""
    _banner("INTERMEDIATE-AXIS TUMBLE")
    print("Body: j = [0.1, 0.2, 0.3] kg·m², spin 2 rad/s about y")

    log = run_tumble_test(t_final=cfg.run.t_final, options=cfg.options, verbose=cfg.run.verbose)
    print_statistics(log, "Tumble")

    if show_plots:
        plot_rates(log, "Tumble: Body Rates")
        plot_euler_time(log, "Tumble: Euler Angles")

    return log


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    cfg, args = load_config_from_args(argv)

    # Banner
    print("=" * 60)
    print("  SIXDOF: Rigid-Body Kinematics, Forward-Euler Integration")
    print("=" * 60)

    v = cfg.vehicle
    print(f"\nVehicle Parameters:")
    print(f"  Mass: {v.mass} kg")
    print(f"  Inertia: j_x={v.j_x}, j_y={v.j_y}, j_z={v.j_z}, j_xz={v.j_xz} kg·m²")
    print(f"  Time step: {cfg.options.solver.dt*1000:.1f} ms")

    if args.save_config:
        save_config(cfg, args.save_config)
        print(f"  Config saved to {args.save_config}")

    show_plots = not args.no_plot

    # Run requested scenario(s)
    scenario = cfg.run.scenario
    if scenario in ("spin", "all"):
        run_spin(cfg, show_plots=show_plots)
    if scenario in ("thrust", "all"):
        run_thrust(cfg, show_plots=show_plots)
    if scenario in ("tumble", "all"):
        run_tumble(cfg, show_plots=show_plots)

    # Summary
    _banner("SIMULATION COMPLETE")

    if show_plots:
        print("\nDisplaying plots... Close plot windows to exit.")
        plt.show()
    else:
        print("\nPlots disabled. Use without --no-plot to see visualizations.")


if __name__ == "__main__":
    main()
