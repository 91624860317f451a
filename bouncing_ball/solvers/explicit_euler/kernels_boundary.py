# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Wall clamping and reflection for the explicit Euler solver

from dataclasses import replace
from typing import Tuple

from ...sim import LinearMap2, Vector2

RESTITUTION = 0.8


def make_reflectors(restitution: float = RESTITUTION) -> Tuple[LinearMap2, LinearMap2]:
    """
    Build the (horizontal, vertical) reflectors for a restitution coefficient.

    The horizontal reflector flips and damps the x velocity when the ball
    hits the left or right wall; the vertical one does the same for y.
    """
    if not 0.0 <= restitution <= 1.0:
        raise ValueError(f"Restitution must be in [0, 1], got {restitution}")
    reflect_horizontally = LinearMap2([[-restitution, 0.0], [0.0, 1.0]])
    reflect_vertically = LinearMap2([[1.0, 0.0], [0.0, -restitution]])
    return reflect_horizontally, reflect_vertically


REFLECT_HORIZONTALLY, REFLECT_VERTICALLY = make_reflectors()


def apply_boundary_2d(
    position: Vector2,
    velocity: Vector2,
    width: float,
    height: float,
    reflect_horizontally: LinearMap2 = REFLECT_HORIZONTALLY,
    reflect_vertically: LinearMap2 = REFLECT_VERTICALLY,
) -> Tuple[Vector2, Vector2]:
    """
    Clamp a candidate position to the box and reflect the velocity.

    The x axis is handled first, then y. Only strict overshoot reflects:
    a position exactly on a wall is left alone. A corner overshoot applies
    both reflectors.

    Args:
        position: Candidate position after the step
        velocity: Candidate velocity after the step
        width: Box width
        height: Box height
        reflect_horizontally: Map applied on a left/right wall hit
        reflect_vertically: Map applied on a floor/ceiling hit

    Returns:
        (position, velocity) after clamping and reflection
    """
    # X dimension
    if position.x < 0:
        position = replace(position, x=0.0)
        velocity = reflect_horizontally.apply(velocity)
    elif position.x > width:
        position = replace(position, x=float(width))
        velocity = reflect_horizontally.apply(velocity)

    # Y dimension
    if position.y < 0:
        position = replace(position, y=0.0)
        velocity = reflect_vertically.apply(velocity)
    elif position.y > height:
        position = replace(position, y=float(height))
        velocity = reflect_vertically.apply(velocity)

    return position, velocity
