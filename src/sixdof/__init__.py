"""
sixdof: Rigid-Body 6-DOF Kinematics

Euler-angle rigid-body kinematics with Forward-Euler integration.
"""

from sixdof.types import VehicleState, StateDerivatives, Wrench, SimLog
from sixdof.params import InertialParams, SimOptions, SolverOptions, default_params
from sixdof.kinematics import KinematicsIntegrator
from sixdof.vehicle import Vehicle
from sixdof.sim import run_sim

__version__ = "0.1.0"

__all__ = [
    "VehicleState",
    "StateDerivatives",
    "Wrench",
    "SimLog",
    "InertialParams",
    "SimOptions",
    "SolverOptions",
    "default_params",
    "KinematicsIntegrator",
    "Vehicle",
    "run_sim",
]
