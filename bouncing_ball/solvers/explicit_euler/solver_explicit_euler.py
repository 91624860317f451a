# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Explicit Euler solver with lossy wall reflections

from dataclasses import replace
from typing import Tuple

from ...sim import LinearMap2, SimulationState
from ..solver import SolverBase, check_step_inputs
from .kernels_boundary import (
    REFLECT_HORIZONTALLY,
    REFLECT_VERTICALLY,
    RESTITUTION,
    apply_boundary_2d,
    make_reflectors,
)


def integrate_explicit_euler(
    state: SimulationState,
    dt: float,
    reflect_horizontally: LinearMap2 = REFLECT_HORIZONTALLY,
    reflect_vertically: LinearMap2 = REFLECT_VERTICALLY,
) -> Tuple[SimulationState, int]:
    """
    One explicit Euler step followed by wall clamping.

    Returns:
        (next_state, number of walls hit during the step)
    """
    new_v = state.velocity + state.acceleration * dt
    # Old velocity, not new_v
    candidate_x = state.position + state.velocity * dt

    new_x, new_v = apply_boundary_2d(
        candidate_x,
        new_v,
        state.width,
        state.height,
        reflect_horizontally,
        reflect_vertically,
    )
    contacts = int(new_x.x != candidate_x.x) + int(new_x.y != candidate_x.y)

    return replace(state, position=new_x, velocity=new_v), contacts


class SolverExplicitEuler(SolverBase):
    """
    Explicit Euler integrator for a point mass under constant acceleration.

    The position is advanced with the velocity from *before* this step's
    update, then clamped to the box; wall hits flip and damp the offending
    velocity component by the restitution coefficient.

    Example:
        >>> state = SimulationState.from_physical_units()
        >>> solver = SolverExplicitEuler()
        >>> for i in range(100):
        >>>     state = solver.step(state, dt=10.0)
    """

    def __init__(self, restitution: float = RESTITUTION):
        """
        Initialize the solver.

        Args:
            restitution: Fraction of the normal velocity kept after a bounce
        """
        super().__init__()
        self.restitution = restitution
        self.reflect_horizontally, self.reflect_vertically = make_reflectors(restitution)

        # Wall contacts seen so far (a corner hit counts twice)
        self.bounce_count = 0

    def _advance(self, state: SimulationState, dt: float) -> SimulationState:
        new_state, contacts = integrate_explicit_euler(
            state, dt, self.reflect_horizontally, self.reflect_vertically
        )
        self.bounce_count += contacts
        return new_state


def step(state: SimulationState, dt: float) -> SimulationState:
    """
    Advance ``state`` by ``dt`` ms with the default 0.8 restitution.

    Pure: the same inputs always give the same output.

    Raises:
        MissingStateError: If ``state`` is None
    """
    check_step_inputs(state, dt)
    new_state, _ = integrate_explicit_euler(state, dt)
    return new_state
