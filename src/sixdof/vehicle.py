"""
Reference vehicle collaborator.

Holds the inertial parameters and the vehicle-side copy of the state, and
exposes the body-to-earth rotation matrix the integrator consumes.
"""

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from sixdof.math3d import euler_to_R
from sixdof.params import InertialParams, default_params
from sixdof.types import VehicleState


class Vehicle:
    """
    Rigid vehicle with Euler-angle attitude.

    Args:
        inertial: Inertial parameters (default: default_params())
        state: Initial state; copied, never aliased (default: all zeros)
    """

    def __init__(
        self,
        inertial: Optional[InertialParams] = None,
        state: Optional[VehicleState] = None,
    ) -> None:
        self.inertial = inertial if inertial is not None else default_params()
        self.state = state.clone() if state is not None else VehicleState.zeros()

    def R_be(self) -> NDArray[np.float64]:
        """Body-to-earth rotation matrix from the current Euler angles."""
        return euler_to_R(self.state.orientation)

    def get_state(self) -> VehicleState:
        return self.state.clone()

    def set_state(self, state: VehicleState) -> None:
        self.state.copy_from(state)
