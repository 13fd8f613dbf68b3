"""
Visualization functions for simulation results.

Provides time-history and path plots of the logged rigid-body state.
"""

import numpy as np
from numpy.typing import NDArray

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from sixdof.types import SimLog


def _plot_components(
    t: NDArray[np.float64],
    data: NDArray[np.float64],
    labels: list,
    unit: str,
    title: str,
) -> Figure:
    """Three stacked axes, one per vector component."""
    fig, axes = plt.subplots(3, 1, figsize=(10, 8), sharex=True)

    colors = ['r', 'g', 'b']

    for i, (ax, label, color) in enumerate(zip(axes, labels, colors)):
        ax.plot(t, data[:, i], '-', color=color, label=label, linewidth=1.5)
        ax.set_ylabel(f'{label} [{unit}]')
        ax.legend(loc='upper right')
        ax.grid(True, alpha=0.3)

    axes[-1].set_xlabel('Time [s]')
    axes[0].set_title(title)

    fig.tight_layout()
    return fig


def plot_pos_time(
    log: SimLog,
    title: str = "Position vs Time",
    show: bool = False,
) -> Figure:
    """
    Plot earth-frame position components over time.

    Args:
        log: Simulation log
        title: Plot title
        show: If True, call plt.show()

    Returns:
        matplotlib Figure
    """
    fig = _plot_components(log.t, log.position, ['X', 'Y', 'Z'], 'm', title)

    if show:
        plt.show()

    return fig


def plot_euler_time(
    log: SimLog,
    title: str = "Euler Angles vs Time",
    show: bool = False,
) -> Figure:
    """
    Plot roll, pitch and yaw over time, in degrees.

    The integrated yaw is plotted as-is, without wrapping to [-180, 180].
    """
    euler_deg = np.rad2deg(log.orientation)
    fig = _plot_components(log.t, euler_deg, ['Roll', 'Pitch', 'Yaw'], 'deg', title)

    # Pitch singularity
    ax_pitch = fig.axes[1]
    for limit in (-90.0, 90.0):
        ax_pitch.axhline(limit, color='k', linestyle=':', alpha=0.5)

    if show:
        plt.show()

    return fig


def plot_rates(
    log: SimLog,
    title: str = "Body Rates",
    show: bool = False,
) -> Figure:
    """
    Plot body-frame angular velocity components (p, q, r) in deg/s.
    """
    rates_deg = np.rad2deg(log.angular_velocity_body)
    fig = _plot_components(log.t, rates_deg, ['p', 'q', 'r'], 'deg/s', title)

    if show:
        plt.show()

    return fig


def plot_velocity_body(
    log: SimLog,
    title: str = "Body Velocity",
    show: bool = False,
) -> Figure:
    fig = _plot_components(log.t, log.linear_velocity_body, ['u', 'v', 'w'], 'm/s', title)

    if show:
        plt.show()

    return fig


def plot_3d_path(
    log: SimLog,
    title: str = "3D Path",
    show: bool = False,
) -> Figure:
    """
    Plot the earth-frame 3D path.

    Args:
        log: Simulation log
        title: Plot title
        show: If True, call plt.show()

    Returns:
        matplotlib Figure
    """
    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(111, projection='3d')

    p = log.position
    ax.plot(p[:, 0], p[:, 1], p[:, 2], 'r-', label='Path', linewidth=1.5)

    # Mark start and end
    ax.scatter(*p[0], c='g', s=100, label='Start', marker='o')
    ax.scatter(*p[-1], c='r', s=100, label='End', marker='x')

    ax.set_xlabel('X [m]')
    ax.set_ylabel('Y [m]')
    ax.set_zlabel('Z [m]')
    ax.set_title(title)
    ax.legend()

    fig.tight_layout()

    if show:
        plt.show()

    return fig
