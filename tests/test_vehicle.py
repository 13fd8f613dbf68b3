"""Tests for the reference Vehicle collaborator."""

import numpy as np

from sixdof.math3d import euler_to_R, inertia_inverse, inertia_tensor
from sixdof.params import InertialParams, default_params, quadrotor_params
from sixdof.types import VehicleState
from sixdof.vehicle import Vehicle


def test_default_vehicle():
    v = Vehicle()
    assert v.inertial == default_params()
    assert np.allclose(v.R_be(), np.eye(3))


def test_R_be_follows_state_orientation():
    v = Vehicle(quadrotor_params())
    v.state.set_orientation([0.1, -0.2, 0.3])
    assert np.allclose(v.R_be(), euler_to_R([0.1, -0.2, 0.3]))


def test_initial_state_is_copied():
    s = VehicleState(position=[1, 2, 3])
    v = Vehicle(InertialParams(), s)

    s.position[0] = 50.0
    assert v.state.position[0] == 1.0


def test_get_and_set_state_copy_by_value():
    v = Vehicle()
    s = VehicleState(linear_velocity_body=[10, 0, 0])
    v.set_state(s)
    s.linear_velocity_body[0] = 0.0
    assert v.state.linear_velocity_body[0] == 10.0

    out = v.get_state()
    out.linear_velocity_body[0] = -1.0
    assert v.state.linear_velocity_body[0] == 10.0


def test_default_inertia_is_invertible():
    p = InertialParams()
    J = inertia_tensor(p.j_x, p.j_y, p.j_z, p.j_xz)
    assert np.allclose(J @ inertia_inverse(p.j_x, p.j_y, p.j_z, p.j_xz), np.eye(3))
    assert J[0, 2] == -p.j_xz
