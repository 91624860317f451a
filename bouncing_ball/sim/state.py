# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# State record for the bouncing ball simulation

from dataclasses import dataclass
from typing import Tuple

from .vector import Vector2

# The live simulation runs in px and ms; initial conditions are authored
# in meters and seconds and converted once.
PX_PER_M = 8221
MS_PER_S = 1000


@dataclass(frozen=True)
class SimulationState:
    """
    Snapshot of the ball and the box it bounces in.

    ``acceleration``, ``width`` and ``height`` stay fixed for the whole run;
    every integration step returns a new state with ``position`` and
    ``velocity`` replaced.

    Attributes:
        position: Ball position in px (origin bottom-left, y up)
        velocity: Ball velocity in px/ms
        acceleration: Constant acceleration in px/ms^2
        width: Box width in px
        height: Box height in px
    """

    position: Vector2
    velocity: Vector2
    acceleration: Vector2
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Box must have positive size, got {self.width} x {self.height}"
            )

    @classmethod
    def from_physical_units(
        cls,
        position: Tuple[float, float] = (50.0, 50.0),
        velocity: Tuple[float, float] = (0.1, 0.3),
        acceleration: Tuple[float, float] = (0.0, -0.98),
        width: float = 800,
        height: float = 500,
    ) -> "SimulationState":
        """
        Create the initial state from physical-unit inputs.

        Args:
            position: Initial position in px
            velocity: Initial velocity in m/s
            acceleration: Constant acceleration in m/s^2 (default is 1/10 g)
            width: Box width in px
            height: Box height in px

        Returns:
            SimulationState in px / ms units
        """
        return cls(
            position=Vector2(float(position[0]), float(position[1])),
            velocity=Vector2(*velocity).scalar_multiply(PX_PER_M / MS_PER_S),
            acceleration=Vector2(*acceleration).scalar_multiply(
                PX_PER_M / (MS_PER_S * MS_PER_S)
            ),
            width=width,
            height=height,
        )


def to_screen(state: SimulationState) -> Tuple[float, float]:
    """Convert the physics frame (y up) to the screen frame (y down)."""
    x, y = state.position
    return x, state.height - y
