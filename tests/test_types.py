"""Tests for state, derivative and wrench containers."""

import numpy as np

from sixdof.types import SimLog, StateDerivatives, VehicleState, Wrench


# ---- VehicleState -----------------------------------------------------------

def test_new_state_is_all_zero():
    s = VehicleState()
    for vec in (s.position, s.orientation, s.linear_velocity_body, s.angular_velocity_body):
        assert vec.shape == (3,)
        assert vec.dtype == np.float64
        assert np.array_equal(vec, np.zeros(3))


def test_setters_and_getters_are_independent():
    s = VehicleState.zeros()
    s.set_position([1, 2, 3])
    s.set_orientation([0.1, 0.2, 0.3])
    s.set_linear_velocity_body([4, 5, 6])
    s.set_angular_velocity_body([0.4, 0.5, 0.6])

    assert np.allclose(s.get_position(), [1, 2, 3])
    assert np.allclose(s.get_orientation(), [0.1, 0.2, 0.3])
    assert np.allclose(s.get_linear_velocity_body(), [4, 5, 6])
    assert np.allclose(s.get_angular_velocity_body(), [0.4, 0.5, 0.6])


def test_setter_copies_argument():
    v = np.array([1.0, 2.0, 3.0])
    s = VehicleState.zeros()
    s.set_linear_velocity_body(v)
    v[0] = -1.0

    assert s.linear_velocity_body[0] == 1.0


def test_getter_returns_copy():
    s = VehicleState(position=[1, 2, 3])
    p = s.get_position()
    p[:] = 0.0

    assert np.allclose(s.position, [1, 2, 3])


def test_constructor_copies_arrays():
    p = np.array([1.0, 2.0, 3.0])
    s = VehicleState(position=p)
    p[0] = 10.0

    assert s.position[0] == 1.0


def test_no_validation_of_contents():
    s = VehicleState.zeros()
    s.set_orientation([np.nan, np.pi / 2, np.inf])
    assert np.isnan(s.orientation[0])
    assert np.isinf(s.orientation[2])


def test_clone_is_independent():
    s = VehicleState(position=[1, 2, 3], angular_velocity_body=[0, 0, 1])
    c = s.clone()

    assert c is not s
    assert np.array_equal(c.as_array(), s.as_array())

    c.position[0] = 99.0
    s.angular_velocity_body[2] = -5.0
    assert s.position[0] == 1.0
    assert c.angular_velocity_body[2] == 1.0


def test_copy_from_overwrites_all_vectors():
    src = VehicleState(
        position=[1, 2, 3],
        orientation=[0.1, 0.2, 0.3],
        linear_velocity_body=[4, 5, 6],
        angular_velocity_body=[0.7, 0.8, 0.9],
    )
    dst = VehicleState(position=[-1, -1, -1])
    dst.copy_from(src)

    assert np.array_equal(dst.as_array(), src.as_array())

    src.orientation[1] = 1.0
    assert dst.orientation[1] == 0.2


def test_as_array_order_and_from_array():
    s = VehicleState(
        position=[1, 2, 3],
        orientation=[4, 5, 6],
        linear_velocity_body=[7, 8, 9],
        angular_velocity_body=[10, 11, 12],
    )
    x = s.as_array()
    assert np.array_equal(x, np.arange(1, 13, dtype=float))

    back = VehicleState.from_array(x)
    x[0] = 0.0
    assert np.array_equal(back.linear_velocity_body, [7, 8, 9])
    assert back.position[0] == 1.0


# ---- StateDerivatives / Wrench ----------------------------------------------

def test_state_derivatives_serial_order():
    d = StateDerivatives(
        position_dot=[1, 1, 1],
        orientation_dot=[2, 2, 2],
        linear_velocity_dot=[3, 3, 3],
        angular_velocity_dot=[4, 4, 4],
    )
    assert np.array_equal(d.serial(), np.repeat([1.0, 2.0, 3.0, 4.0], 3))


def test_wrench_zeros():
    w = Wrench.zeros()
    assert np.array_equal(w.force_body, np.zeros(3))
    assert np.array_equal(w.torque_body, np.zeros(3))


# ---- SimLog -----------------------------------------------------------------

def test_simlog_record_and_trim():
    log = SimLog.allocate(10)
    s = VehicleState.zeros()
    w = Wrench(force_body=[1, 0, 0])

    for i in range(4):
        s.set_position([i, 0, 0])
        log.record(0.1 * i, s, w, np.full(12, float(i)))

    trimmed = log.trim()
    assert len(trimmed) == 4
    assert trimmed.t.shape == (4,)
    assert trimmed.derivatives.shape == (4, 12)
    assert np.allclose(trimmed.position[:, 0], [0, 1, 2, 3])
    assert np.allclose(trimmed.force_body[:, 0], 1.0)
