"""
Core data types for rigid-body kinematics.

All vectors are numpy float arrays of shape (3,) in SI units.
Euler angle convention: [roll, pitch, yaw] (ZYX, yaw-pitch-roll).
Body frame: fixed to the vehicle. Earth frame: fixed inertial reference.
"""

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _vec3(v: ArrayLike) -> NDArray[np.float64]:
    """Copy an array-like into a new float vector of shape (3,)."""
    return np.array(v, dtype=np.float64).reshape(3)


@dataclass(eq=False)
class VehicleState:
    """
    Rigid-body 6-DOF state.

    Every setter stores a copy of its argument, so a state never shares
    memory with caller-owned arrays or with another state.

    Attributes:
        position: Position in earth frame [m], shape (3,)
        orientation: Euler angles [roll, pitch, yaw] [rad], shape (3,)
        linear_velocity_body: Linear velocity in body frame [m/s], shape (3,)
        angular_velocity_body: Angular velocity in body frame [rad/s], shape (3,)

    Pitch must stay away from +/-90 deg for the Euler kinematics to be
    defined. This is a modeling precondition and is not checked here.
    """

    position: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    orientation: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    linear_velocity_body: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    angular_velocity_body: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.orientation = _vec3(self.orientation)
        self.linear_velocity_body = _vec3(self.linear_velocity_body)
        self.angular_velocity_body = _vec3(self.angular_velocity_body)

    # ---- accessors --------------------------------------------------------

    def get_position(self) -> NDArray[np.float64]:
        return self.position.copy()

    def set_position(self, position: ArrayLike) -> None:
        self.position = _vec3(position)

    def get_orientation(self) -> NDArray[np.float64]:
        return self.orientation.copy()

    def set_orientation(self, orientation: ArrayLike) -> None:
        self.orientation = _vec3(orientation)

    def get_linear_velocity_body(self) -> NDArray[np.float64]:
        return self.linear_velocity_body.copy()

    def set_linear_velocity_body(self, velocity: ArrayLike) -> None:
        self.linear_velocity_body = _vec3(velocity)

    def get_angular_velocity_body(self) -> NDArray[np.float64]:
        return self.angular_velocity_body.copy()

    def set_angular_velocity_body(self, rates: ArrayLike) -> None:
        self.angular_velocity_body = _vec3(rates)

    # ---- copies -----------------------------------------------------------

    def clone(self) -> "VehicleState":
        """Create a deep copy of this state."""
        return VehicleState(
            position=self.position,
            orientation=self.orientation,
            linear_velocity_body=self.linear_velocity_body,
            angular_velocity_body=self.angular_velocity_body,
        )

    def copy_from(self, other: "VehicleState") -> None:
        """Overwrite all four vectors with copies of another state's."""
        self.set_position(other.position)
        self.set_orientation(other.orientation)
        self.set_linear_velocity_body(other.linear_velocity_body)
        self.set_angular_velocity_body(other.angular_velocity_body)

    # ---- serial form ------------------------------------------------------

    def as_array(self) -> NDArray[np.float64]:
        """
        Pack the state into a single vector.

        Returns:
            [position, orientation, linear_velocity_body,
            angular_velocity_body], shape (12,)
        """
        return np.concatenate([
            self.position,
            self.orientation,
            self.linear_velocity_body,
            self.angular_velocity_body,
        ])

    @staticmethod
    def from_array(x: ArrayLike) -> "VehicleState":
        """Inverse of as_array()."""
        x = np.asarray(x, dtype=np.float64).reshape(12)
        return VehicleState(
            position=x[0:3],
            orientation=x[3:6],
            linear_velocity_body=x[6:9],
            angular_velocity_body=x[9:12],
        )

    @staticmethod
    def zeros() -> "VehicleState":
        """Create an all-zero state (at origin, level, at rest)."""
        return VehicleState()


@dataclass(eq=False)
class StateDerivatives:
    """
    Time derivatives of the four VehicleState vectors.

    Attributes:
        position_dot: Earth-frame velocity [m/s], shape (3,)
        orientation_dot: Euler angle rates [rad/s], shape (3,)
        linear_velocity_dot: Body-frame linear acceleration [m/s²], shape (3,)
        angular_velocity_dot: Body-frame angular acceleration [rad/s²], shape (3,)
    """

    position_dot: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    orientation_dot: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    linear_velocity_dot: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    angular_velocity_dot: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.position_dot = _vec3(self.position_dot)
        self.orientation_dot = _vec3(self.orientation_dot)
        self.linear_velocity_dot = _vec3(self.linear_velocity_dot)
        self.angular_velocity_dot = _vec3(self.angular_velocity_dot)

    def serial(self) -> NDArray[np.float64]:
        """Derivatives in fixed order, shape (12,)."""
        return np.concatenate([
            self.position_dot,
            self.orientation_dot,
            self.linear_velocity_dot,
            self.angular_velocity_dot,
        ])


@dataclass(eq=False)
class Wrench:
    """
    Force/torque pair applied to the vehicle.

    Attributes:
        force_body: Force in body frame [N], shape (3,)
        torque_body: Torque in body frame [N·m], shape (3,)
    """

    force_body: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    torque_body: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.force_body = _vec3(self.force_body)
        self.torque_body = _vec3(self.torque_body)

    @staticmethod
    def zeros() -> "Wrench":
        """Create a zero wrench."""
        return Wrench()


@dataclass
class SimLog:
    """
    Simulation log storing time histories of state, input and derivatives.

    All arrays have shape (N,) or (N, 3) where N is number of timesteps.
    """

    # Time
    t: NDArray[np.float64]  # (N,)

    # State histories
    position: NDArray[np.float64]  # (N, 3)
    orientation: NDArray[np.float64]  # (N, 3)
    linear_velocity_body: NDArray[np.float64]  # (N, 3)
    angular_velocity_body: NDArray[np.float64]  # (N, 3)

    # Input histories
    force_body: NDArray[np.float64]  # (N, 3)
    torque_body: NDArray[np.float64]  # (N, 3)

    # Derivative histories, serial order, (N, 12)
    derivatives: NDArray[np.float64]

    # Current write index
    _idx: int = field(default=0, repr=False)

    @staticmethod
    def allocate(n_steps: int) -> "SimLog":
        """Pre-allocate arrays for n_steps timesteps."""
        return SimLog(
            t=np.zeros(n_steps),
            position=np.zeros((n_steps, 3)),
            orientation=np.zeros((n_steps, 3)),
            linear_velocity_body=np.zeros((n_steps, 3)),
            angular_velocity_body=np.zeros((n_steps, 3)),
            force_body=np.zeros((n_steps, 3)),
            torque_body=np.zeros((n_steps, 3)),
            derivatives=np.zeros((n_steps, 12)),
            _idx=0,
        )

    def record(
        self,
        t: float,
        state: VehicleState,
        wrench: Wrench,
        derivatives: NDArray[np.float64],
    ) -> None:
        """Record one timestep of data."""
        i = self._idx
        self.t[i] = t
        self.position[i] = state.position
        self.orientation[i] = state.orientation
        self.linear_velocity_body[i] = state.linear_velocity_body
        self.angular_velocity_body[i] = state.angular_velocity_body
        self.force_body[i] = wrench.force_body
        self.torque_body[i] = wrench.torque_body
        self.derivatives[i] = derivatives
        self._idx += 1

    def trim(self) -> "SimLog":
        """Trim arrays to actual recorded length."""
        n = self._idx
        return SimLog(
            t=self.t[:n],
            position=self.position[:n],
            orientation=self.orientation[:n],
            linear_velocity_body=self.linear_velocity_body[:n],
            angular_velocity_body=self.angular_velocity_body[:n],
            force_body=self.force_body[:n],
            torque_body=self.torque_body[:n],
            derivatives=self.derivatives[:n],
            _idx=n,
        )

    def __len__(self) -> int:
        return self._idx
