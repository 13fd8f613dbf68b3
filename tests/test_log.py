"""Tests for log statistics."""

import numpy as np

from sixdof.log import allocate_log, compute_statistics, print_statistics, record_step
from sixdof.params import SimOptions, SolverOptions
from sixdof.sim import run_constant_wrench
from sixdof.types import VehicleState, Wrench


def test_statistics_for_constant_force():
    log = run_constant_wrench(force=(13.5, 0, 0), t_final=1.0, options=SimOptions(SolverOptions(dt=0.1)))
    stats = compute_statistics(log)

    assert np.isclose(stats["simulation_time"], 1.0)
    assert np.isclose(stats["max_speed"], 1.0)
    assert stats["max_rate"] == 0.0
    assert stats["finite"]


def test_statistics_empty_log():
    stats = compute_statistics(allocate_log(5).trim())
    assert stats["simulation_time"] == 0.0
    assert stats["finite"]


def test_non_finite_flagged(capsys):
    log = allocate_log(2)
    s = VehicleState.zeros()
    record_step(log, 0.0, s, Wrench.zeros(), np.zeros(12))
    s.set_orientation([0.0, np.nan, 0.0])
    record_step(log, 0.1, s, Wrench.zeros(), np.full(12, np.inf))

    log = log.trim()
    assert not compute_statistics(log)["finite"]

    print_statistics(log, "Bad")
    out = capsys.readouterr().out
    assert "Bad Statistics:" in out
    assert "WARNING" in out
