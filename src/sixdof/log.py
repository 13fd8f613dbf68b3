"""
Simulation logging utilities.

Provides pre-allocated logging for efficient data collection
during simulation.
"""

import numpy as np
from numpy.typing import NDArray

from sixdof.types import SimLog, VehicleState, Wrench


def allocate_log(n_steps: int) -> SimLog:
    """
    Allocate a SimLog with pre-allocated arrays.

    This is a convenience wrapper around SimLog.allocate().

    Args:
        n_steps: Number of timesteps to allocate

    Returns:
        Pre-allocated SimLog
    """
    return SimLog.allocate(n_steps)


def record_step(
    log: SimLog,
    t: float,
    state: VehicleState,
    wrench: Wrench,
    derivatives: NDArray[np.float64],
) -> None:
    """
    Record one timestep of simulation data.

    Args:
        log: SimLog instance to record into
        t: Current time [s]
        state: State at time t (before integration)
        wrench: Applied force/torque
        derivatives: Serial derivatives computed at time t, shape (12,)
    """
    log.record(t, state, wrench, derivatives)


def compute_statistics(log: SimLog) -> dict:
    """
    Compute summary statistics from simulation log.

    Args:
        log: Completed simulation log

    Returns:
        Dictionary with statistics:
        - simulation_time: Last recorded time [s]
        - distance: Straight-line distance from start to end [m]
        - max_speed: Maximum body-frame speed [m/s]
        - max_rate: Maximum angular rate magnitude [rad/s]
        - max_pitch: Maximum |pitch| [rad]
        - finite: True if every recorded value is finite
    """
    if len(log.t) == 0:
        return {
            "simulation_time": 0.0,
            "distance": 0.0,
            "max_speed": 0.0,
            "max_rate": 0.0,
            "max_pitch": 0.0,
            "finite": True,
        }

    speed = np.linalg.norm(log.linear_velocity_body, axis=1)
    rate = np.linalg.norm(log.angular_velocity_body, axis=1)

    stats = {
        "simulation_time": float(log.t[-1]),
        "distance": float(np.linalg.norm(log.position[-1] - log.position[0])),
        "max_speed": float(np.max(speed)),
        "max_rate": float(np.max(rate)),
        "max_pitch": float(np.max(np.abs(log.orientation[:, 1]))),
        "finite": bool(
            np.all(np.isfinite(log.position))
            and np.all(np.isfinite(log.orientation))
            and np.all(np.isfinite(log.derivatives))
        ),
    }

    return stats


def print_statistics(log: SimLog, name: str = "Simulation") -> None:
    """
    Print summary statistics to console.

    Args:
        log: Completed simulation log
        name: Name of simulation for display
    """
    stats = compute_statistics(log)

    print(f"\n{name} Statistics:")
    print(f"  Duration:        {stats['simulation_time']:.2f} s")
    print(f"  Distance:        {stats['distance']:.3f} m")
    print(f"  Max speed:       {stats['max_speed']:.3f} m/s")
    print(f"  Max rate:        {np.degrees(stats['max_rate']):.2f} deg/s")
    print(f"  Max |pitch|:     {np.degrees(stats['max_pitch']):.2f} deg")
    if not stats["finite"]:
        print("  WARNING: non-finite values in log (check mass, inertia, pitch)")
