"""Tests for the simulation driver."""

import numpy as np
import pytest

from sixdof.params import InertialParams, SimOptions, SolverOptions, quadrotor_params
from sixdof.sim import (
    constant_wrench,
    run_constant_wrench,
    run_free_spin,
    run_sim,
    run_tumble_test,
)
from sixdof.types import VehicleState, Wrench
from sixdof.vehicle import Vehicle


def options(dt: float) -> SimOptions:
    return SimOptions(solver=SolverOptions(dt=dt))


# ---- Test 1: Log bookkeeping --------------------------------------------------

def test_log_length_includes_t0():
    log = run_constant_wrench(t_final=1.0, options=options(0.1))
    assert len(log) == 11
    assert np.isclose(log.t[0], 0.0)
    assert np.isclose(log.t[-1], 1.0)


# ---- Test 2: Constant force from rest -----------------------------------------

def test_constant_force_accelerates_linearly():
    params = InertialParams()
    dt = 0.01
    log = run_constant_wrench(params, force=(2.0 * params.mass, 0, 0), t_final=1.0, options=options(dt))

    # Logged state is the state before each step: v_k = a * k * dt
    assert np.allclose(log.linear_velocity_body[:, 0], 2.0 * log.t)
    assert np.allclose(log.derivatives[:, 6], 2.0)
    assert np.allclose(log.force_body[:, 0], 2.0 * params.mass)

    # Forward-Euler position: x_k = a * dt^2 * k(k-1)/2
    k = np.arange(len(log))
    assert np.allclose(log.position[:, 0], 2.0 * dt**2 * k * (k - 1) / 2)


# ---- Test 3: Steady spin --------------------------------------------------------

def test_free_spin_about_principal_axis_is_steady():
    log = run_free_spin(quadrotor_params(), rates=(0, 0, 1.0), t_final=2.0, options=options(0.01))

    assert np.allclose(log.angular_velocity_body, [0, 0, 1.0])
    assert np.allclose(log.orientation[:, 2], log.t)
    assert np.allclose(log.position, 0.0)


# ---- Test 4: Intermediate-axis instability --------------------------------------

def test_tumble_grows_perturbation():
    log = run_tumble_test(t_final=20.0, options=options(0.01))

    assert np.abs(log.angular_velocity_body[0, 0]) < 0.02
    assert np.max(np.abs(log.angular_velocity_body[:, 0])) > 0.5, \
        "Spin about the intermediate axis should not stay steady"


# ---- Test 5: Vehicle receives the final state -----------------------------------

def test_run_sim_writes_state_back_to_vehicle():
    params = InertialParams()
    vehicle = Vehicle(params, VehicleState(linear_velocity_body=[1, 0, 0]))
    log = run_sim(vehicle, constant_wrench([0, 0, 0], [0, 0, 0]), t_final=1.0, options=options(0.1))

    # 11 steps of 0.1 s at 1 m/s
    assert np.allclose(vehicle.state.position, [1.1, 0, 0])
    assert np.allclose(log.position[-1], [1.0, 0, 0])


# ---- Test 6: Wrench function sees time and state --------------------------------

def test_wrench_fn_receives_time_and_state_copy():
    seen = []

    def wrench_fn(t, state):
        seen.append((t, state.position[0]))
        state.position[0] = 1e6  # must not leak into the integrator
        return Wrench.zeros()

    vehicle = Vehicle(InertialParams(), VehicleState(linear_velocity_body=[1, 0, 0]))
    run_sim(vehicle, wrench_fn, t_final=0.2, options=options(0.1))

    assert [round(t, 6) for t, _ in seen] == [0.0, 0.1, 0.2]
    assert np.allclose([x for _, x in seen], [0.0, 0.1, 0.2])


# ---- Test 7: Verbose output -------------------------------------------------------

def test_verbose_prints_progress(capsys):
    vehicle = Vehicle()
    run_sim(vehicle, constant_wrench([0, 0, 0], [0, 0, 0]), t_final=1.0, options=options(0.1), verbose=True)
    out = capsys.readouterr().out
    assert "Starting simulation" in out
    assert "Simulation complete: 11 steps recorded" in out


# ---- Test 8: Scenario helpers forward verbose -------------------------------------

@pytest.mark.parametrize("run_fn", [run_constant_wrench, run_free_spin, run_tumble_test])
def test_scenario_helpers_forward_verbose(capsys, run_fn):
    run_fn(t_final=0.2, options=options(0.1), verbose=True)
    assert "Starting simulation" in capsys.readouterr().out

    run_fn(t_final=0.2, options=options(0.1))
    assert capsys.readouterr().out == ""
