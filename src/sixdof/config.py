"""
Reproducible configuration for simulation runs.

Groups the vehicle inertial parameters, simulation options and run
settings into one dataclass tree, with JSON save/load and an
``argparse``-based loader so that every run can be reconstructed from a
single JSON file.

Physical plausibility (positive mass, non-singular inertia, positive
time step) is checked here, not in the integrator.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sixdof.params import InertialParams, SimOptions, SolverOptions


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass
class RunConfig:
    """Which scenario to run and for how long."""

    scenario: str = "all"            # "spin" | "thrust" | "tumble" | "all"
    t_final: float = 10.0
    verbose: bool = False


# ---------------------------------------------------------------------------
# Composite config
# ---------------------------------------------------------------------------

@dataclass
class FullConfig:
    vehicle: InertialParams = field(default_factory=InertialParams)
    options: SimOptions = field(default_factory=SimOptions)
    run: RunConfig = field(default_factory=RunConfig)


SCENARIOS = ("spin", "thrust", "tumble", "all")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_config(cfg: FullConfig) -> FullConfig:
    """Raise ValueError if the configuration is not physically usable."""
    v = cfg.vehicle
    if cfg.options.solver.dt <= 0:
        raise ValueError(f"solver.dt must be positive, got {cfg.options.solver.dt}")
    if cfg.run.t_final <= 0:
        raise ValueError(f"run.t_final must be positive, got {cfg.run.t_final}")
    if cfg.run.scenario not in SCENARIOS:
        raise ValueError(f"run.scenario must be one of {SCENARIOS}, got {cfg.run.scenario!r}")
    if v.mass <= 0:
        raise ValueError(f"vehicle.mass must be positive, got {v.mass}")
    for name in ("j_x", "j_y", "j_z"):
        if getattr(v, name) <= 0:
            raise ValueError(f"vehicle.{name} must be positive, got {getattr(v, name)}")
    if v.j_x * v.j_z <= v.j_xz ** 2:
        raise ValueError(
            f"inertia tensor is singular or not positive definite "
            f"(j_x*j_z={v.j_x * v.j_z}, j_xz^2={v.j_xz ** 2})"
        )
    return cfg


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def config_to_dict(cfg: FullConfig) -> Dict[str, Any]:
    return asdict(cfg)


def _fill(dc: object, data: Dict[str, Any], section: str) -> None:
    known = {f.name for f in fields(dc)}
    for key, val in data.items():
        if key not in known:
            raise ValueError(f"unknown config key {section}.{key}")
        setattr(dc, key, val)


def config_from_dict(data: Dict[str, Any]) -> FullConfig:
    """Build a FullConfig from a (possibly partial) nested dict."""
    cfg = FullConfig()
    for key in data:
        if key not in ("vehicle", "options", "run"):
            raise ValueError(f"unknown config section {key!r}")

    _fill(cfg.vehicle, data.get("vehicle", {}), "vehicle")
    _fill(cfg.run, data.get("run", {}), "run")

    options = dict(data.get("options", {}))
    solver = options.pop("solver", {})
    if options:
        raise ValueError(f"unknown config key options.{next(iter(options))}")
    cfg.options = SimOptions(solver=SolverOptions())
    _fill(cfg.options.solver, solver, "options.solver")

    return validate_config(cfg)


def save_config(cfg: FullConfig, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config_to_dict(cfg), f, indent=2)


def load_config(path: str | Path) -> FullConfig:
    with open(path) as f:
        return config_from_dict(json.load(f))


# ---------------------------------------------------------------------------
# Argparse loader
# ---------------------------------------------------------------------------

def add_config_args(parser: argparse.ArgumentParser) -> None:
    g = parser.add_argument_group("Configuration")
    g.add_argument("--config", type=str, default=None, help="JSON config file")
    g.add_argument("--save-config", type=str, default=None, help="Write the resolved config here")

    g = parser.add_argument_group("Vehicle")
    g.add_argument("--mass", type=float, default=None)
    g.add_argument("--j-x", type=float, default=None)
    g.add_argument("--j-y", type=float, default=None)
    g.add_argument("--j-z", type=float, default=None)
    g.add_argument("--j-xz", type=float, default=None)

    g = parser.add_argument_group("Run")
    g.add_argument("--scenario", "-s", type=str, choices=SCENARIOS, default=None)
    g.add_argument("--t-final", type=float, default=None)
    g.add_argument("--dt", type=float, default=None)
    g.add_argument("--verbose", action="store_true", default=None)


def _apply_overrides(dc: object, ns: argparse.Namespace, keys: List[str]) -> None:
    """Apply non-None argparse values to the dataclass."""
    for key in keys:
        arg_key = key.replace("-", "_")
        val = getattr(ns, arg_key, None)
        if val is not None:
            setattr(dc, arg_key, val)


def config_from_namespace(args: argparse.Namespace) -> FullConfig:
    """Defaults, then the JSON file (if any), then CLI overrides."""
    cfg = load_config(args.config) if args.config else FullConfig()

    _apply_overrides(cfg.vehicle, args, ["mass", "j_x", "j_y", "j_z", "j_xz"])
    _apply_overrides(cfg.run, args, ["scenario", "t_final", "verbose"])
    if args.dt is not None:
        cfg.options.solver.dt = args.dt

    return validate_config(cfg)


def load_config_from_args(
    argv: Optional[Sequence[str]] = None,
    description: str = "Rigid-body 6-DOF kinematics simulation",
) -> Tuple[FullConfig, argparse.Namespace]:
    """Build a :class:`FullConfig` from defaults + JSON file + CLI overrides.

    Returns
    -------
    cfg : FullConfig
    args : argparse.Namespace  (raw, for any extra flags the caller added)
    """
    parser = argparse.ArgumentParser(description=description)
    add_config_args(parser)
    parser.add_argument("--no-plot", action="store_true", help="Disable plot display")
    args = parser.parse_args(argv)

    return config_from_namespace(args), args
