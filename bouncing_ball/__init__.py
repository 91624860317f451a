# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
"""
Point mass bouncing in a box under constant gravity.

Architecture:
    - sim: Vector2 / LinearMap2 value types, SimulationState, to_screen
    - solvers: SolverExplicitEuler and the functional ``step``

Example:
    >>> from bouncing_ball import SimulationState, step
    >>> state = SimulationState.from_physical_units()
    >>> state = step(state, 10.0)
"""

from .sim import (
    MS_PER_S,
    PX_PER_M,
    LinearMap2,
    SimulationState,
    Vector2,
    kinetic_energy,
    potential_energy,
    to_screen,
    total_energy,
)
from .solvers import MissingStateError, SolverBase, SolverExplicitEuler, step

__all__ = [
    "Vector2",
    "LinearMap2",
    "SimulationState",
    "to_screen",
    "PX_PER_M",
    "MS_PER_S",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
    "SolverBase",
    "SolverExplicitEuler",
    "MissingStateError",
    "step",
]
