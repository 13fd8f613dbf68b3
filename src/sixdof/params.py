"""
Vehicle inertial parameters and simulation options.

Default inertial values are for the Aerosonde UAV (~13.5 kg fixed-wing).
"""

from dataclasses import dataclass, field

from sixdof.math3d import inertia_tensor


@dataclass
class InertialParams:
    """
    Rigid-body inertial parameters.

    Physical Parameters:
        mass: Mass [kg]
        j_x, j_y, j_z: Principal moments of inertia [kg·m²]
        j_xz: Product of inertia [kg·m²]

    The x-z body plane is assumed to be a plane of symmetry (j_xy = j_yz = 0).
    Nothing is validated here; see sixdof.config.validate_config.
    """

    mass: float = 13.5  # kg
    j_x: float = 0.8244  # kg·m²
    j_y: float = 1.135  # kg·m²
    j_z: float = 1.759  # kg·m²
    j_xz: float = 0.1204  # kg·m²


@dataclass
class SolverOptions:
    """Integration settings."""

    dt: float = 0.01  # s, 100 Hz


@dataclass
class SimOptions:
    """Top-level simulation options, read once at integrator construction."""

    solver: SolverOptions = field(default_factory=SolverOptions)


def default_params() -> InertialParams:
    """
    Create default inertial parameters.

    Returns an InertialParams instance for the Aerosonde UAV.
    """
    return InertialParams()


def quadrotor_params() -> InertialParams:
    """
    Create inertial parameters for a ~500g hobby quadrotor.

    Symmetric about all body axes, so j_xz is zero.
    """
    return InertialParams(mass=0.5, j_x=0.0023, j_y=0.0023, j_z=0.004, j_xz=0.0)


def default_options() -> SimOptions:
    """Create default simulation options."""
    return SimOptions()


if __name__ == "__main__":
    # Quick sanity check
    p = default_params()
    print("Default Parameters:")
    print(f"  Mass: {p.mass} kg")
    print(f"  Inertia tensor:\n{inertia_tensor(p.j_x, p.j_y, p.j_z, p.j_xz)}")
    print(f"  Product of inertia j_xz: {p.j_xz}")
    print(f"  Time step: {default_options().solver.dt} s")
