# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Base solver class for the bouncing ball simulation

import math

from ..sim import SimulationState


class MissingStateError(ValueError):
    """Raised when a solver is stepped without a state to advance."""


def check_step_inputs(state: SimulationState, dt: float) -> None:
    """
    Validate the arguments of a step.

    Raises:
        MissingStateError: If ``state`` is None
        ValueError: If ``dt`` is negative or not finite
    """
    if state is None:
        raise MissingStateError("Cannot step the simulation without a state")
    if not math.isfinite(dt) or dt < 0:
        raise ValueError(f"Time step must be finite and non-negative, got {dt}")


class SolverBase:
    """
    Generic base class for bouncing ball solvers.

    ``step`` takes the current ``SimulationState`` and returns a new one,
    leaving the input untouched. Concrete solvers implement ``_advance``.
    """

    def step(self, state: SimulationState, dt: float) -> SimulationState:
        """
        Simulate one time step.

        Args:
            state: The input state
            dt: The time step (in ms)

        Returns:
            The next state
        """
        check_step_inputs(state, dt)
        return self._advance(state, dt)

    def _advance(self, state: SimulationState, dt: float) -> SimulationState:
        raise NotImplementedError("Concrete solvers must implement _advance()")
