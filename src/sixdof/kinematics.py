"""
Rigid-body 6-DOF kinematics and Forward-Euler integration.

Uses Euler-angle attitude representation throughout, which is singular
at pitch = +/-90 deg. Inputs are trusted: a singular inertia tensor raises
numpy.linalg.LinAlgError, and zero mass or a singular attitude produce
non-finite derivatives. Neither is caught here.
"""

from typing import Optional, Protocol

import numpy as np
from numpy.typing import ArrayLike, NDArray

from sixdof.math3d import euler_rate_matrix, inertia_tensor
from sixdof.params import SimOptions, default_options
from sixdof.types import StateDerivatives, VehicleState, Wrench


class Inertial(Protocol):
    """Anything exposing mass and inertia terms, e.g. InertialParams."""

    mass: float
    j_x: float
    j_y: float
    j_z: float
    j_xz: float


def state_derivative(
    state: VehicleState,
    force_body: NDArray[np.float64],
    torque_body: NDArray[np.float64],
    inertial: Inertial,
    R_be: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """
    Compute time derivatives of all state components.

    Dynamics:
        p_dot     = R_be @ v
        euler_dot = E(phi, theta) @ w
        v_dot     = F / m - w × v
        w_dot     = J^{-1} @ (tau - w × (J @ w))

    Every term uses the state as passed in; no term feeds another.

    Args:
        state: Current state
        force_body: Applied force in body frame [N], shape (3,)
        torque_body: Applied torque in body frame [N·m], shape (3,)
        inertial: Mass and inertia terms
        R_be: Body-to-earth rotation matrix, shape (3, 3)

    Returns:
        Tuple of (p_dot, euler_dot, v_dot, w_dot)
    """
    # Unpack state
    euler = state.orientation
    v = state.linear_velocity_body
    w = state.angular_velocity_body

    # Inertia tensor and its inverse (general inversion)
    J = inertia_tensor(inertial.j_x, inertial.j_y, inertial.j_z, inertial.j_xz)
    J_inv = np.linalg.inv(J)

    # Position derivative, earth frame
    p_dot = np.asarray(R_be, dtype=np.float64) @ v

    # Euler angle rates
    phi, theta = euler[0], euler[1]
    euler_dot = euler_rate_matrix(phi, theta) @ w

    # Linear acceleration in the rotating body frame
    linear_acc = force_body / inertial.mass
    coriolis_acc = -np.cross(w, v)
    v_dot = linear_acc + coriolis_acc

    # Angular velocity derivative (Euler's equation)
    # tau = J @ w_dot + w × (J @ w)
    Jw = J @ w
    gyroscopic = np.cross(w, Jw)
    w_dot = J_inv @ (torque_body - gyroscopic)

    return p_dot, euler_dot, v_dot, w_dot


class KinematicsIntegrator:
    """
    Force-torque application, derivative calculation and state integration.

    The integrator exclusively owns its state; every state transfer in
    or out is a value copy.

    Args:
        options: Simulation options; the time step is read from
            options.solver.dt once, here (default: default_options())
    """

    def __init__(self, options: Optional[SimOptions] = None) -> None:
        if options is None:
            options = default_options()

        self.applied_force_body = np.zeros(3)
        self.applied_torque_body = np.zeros(3)
        self.time_step = float(options.solver.dt)
        self.state = VehicleState.zeros()

        self.position_dot = np.zeros(3)
        self.orientation_dot = np.zeros(3)
        self.linear_velocity_dot = np.zeros(3)
        self.angular_velocity_dot = np.zeros(3)

    # ---- input ------------------------------------------------------------

    def set_input(self, force: ArrayLike, torque: ArrayLike) -> None:
        """
        Set the body-frame force [N] and torque [N·m] input.

        Stored verbatim until overwritten. Has no effect on the state until
        derivatives are next computed.
        """
        self.applied_force_body = np.array(force, dtype=np.float64).reshape(3)
        self.applied_torque_body = np.array(torque, dtype=np.float64).reshape(3)

    def set_wrench(self, wrench: Wrench) -> None:
        self.set_input(wrench.force_body, wrench.torque_body)

    # ---- derivatives ------------------------------------------------------

    def compute_derivatives(self, inertial: Inertial, rotation_matrix: ArrayLike) -> None:
        """
        Calculate the state derivatives from the current state and input.

        Args:
            inertial: Mass and inertia terms of the vehicle
            rotation_matrix: Body-to-earth rotation matrix, shape (3, 3)
        """
        (
            self.position_dot,
            self.orientation_dot,
            self.linear_velocity_dot,
            self.angular_velocity_dot,
        ) = state_derivative(
            self.state,
            self.applied_force_body,
            self.applied_torque_body,
            inertial,
            np.asarray(rotation_matrix, dtype=np.float64),
        )

    def get_state_derivatives(self) -> StateDerivatives:
        """Latest derivatives, copied."""
        return StateDerivatives(
            position_dot=self.position_dot,
            orientation_dot=self.orientation_dot,
            linear_velocity_dot=self.linear_velocity_dot,
            angular_velocity_dot=self.angular_velocity_dot,
        )

    def get_state_derivatives_serial(self) -> NDArray[np.float64]:
        """
        Latest derivatives as a single vector.

        Returns:
            [position_dot, orientation_dot, linear_velocity_dot,
            angular_velocity_dot], shape (12,)
        """
        return self.get_state_derivatives().serial()

    # ---- integration ------------------------------------------------------

    def integrate_step(self) -> None:
        """
        Advance the state by one time step with Forward-Euler.

        Uses whatever derivatives were last computed. Calling this twice
        without recomputing reuses the same derivatives.
        """
        dt = self.time_step
        s = self.state
        s.set_position(s.position + self.position_dot * dt)
        s.set_orientation(s.orientation + self.orientation_dot * dt)
        s.set_linear_velocity_body(s.linear_velocity_body + self.linear_velocity_dot * dt)
        s.set_angular_velocity_body(s.angular_velocity_body + self.angular_velocity_dot * dt)

    def step(self, inertial: Inertial, rotation_matrix: ArrayLike) -> None:
        """Compute derivatives for the current state, then integrate once."""
        self.compute_derivatives(inertial, rotation_matrix)
        self.integrate_step()

    # ---- state transfer ---------------------------------------------------

    def get_state(self) -> VehicleState:
        """Independent copy of the internal state."""
        return self.state.clone()

    def set_state(self, external_state: VehicleState) -> None:
        """Overwrite the internal state with a copy of external_state."""
        self.state.copy_from(external_state)

    def write_state(self, external_state: VehicleState) -> None:
        """Copy the internal state into a caller-owned VehicleState."""
        external_state.copy_from(self.state)


if __name__ == "__main__":
    """Quick tests for kinematics module."""
    from sixdof.params import InertialParams, SolverOptions

    print("Running kinematics tests...")

    params = InertialParams()

    # Test 1: At rest with no input, everything stays put
    kin = KinematicsIntegrator(SimOptions(solver=SolverOptions(dt=0.01)))
    kin.compute_derivatives(params, np.eye(3))
    assert np.allclose(kin.get_state_derivatives_serial(), 0.0), "Derivatives at rest should be zero"
    print("  [PASS] Rest equilibrium")

    # Test 2: Newton's law with no rotation
    kin.set_input([27.0, 0.0, -13.5], [0.0, 0.0, 0.0])
    kin.compute_derivatives(params, np.eye(3))
    assert np.allclose(kin.linear_velocity_dot, [2.0, 0.0, -1.0]), "v_dot should be F/m"
    print("  [PASS] Newton's law")

    # Test 3: Steady spin about a principal axis
    quad = InertialParams(mass=0.5, j_x=0.0023, j_y=0.0023, j_z=0.004, j_xz=0.0)
    kin = KinematicsIntegrator()
    s = VehicleState.zeros()
    s.set_angular_velocity_body([0.0, 0.0, 5.0])
    kin.set_state(s)
    kin.compute_derivatives(quad, np.eye(3))
    assert np.allclose(kin.angular_velocity_dot, 0.0, atol=1e-12), "Principal-axis spin should be steady"
    print("  [PASS] Torque-free spin")

    print("\nAll kinematics tests passed!")
