"""
Basic tests for the bouncing ball integrator

Checks the explicit Euler step, wall clamping and reflection, the
coordinate flip and the value types.

Author: NBEL
Date: November 2025
"""

import dataclasses

import numpy as np
import pytest

from bouncing_ball import (
    MS_PER_S,
    PX_PER_M,
    LinearMap2,
    MissingStateError,
    SimulationState,
    SolverExplicitEuler,
    Vector2,
    step,
    to_screen,
    total_energy,
)
from bouncing_ball.solvers import apply_boundary_2d


def make_state(position, velocity, acceleration=(0.0, 0.0), width=800, height=500):
    return SimulationState(
        position=Vector2(*position),
        velocity=Vector2(*velocity),
        acceleration=Vector2(*acceleration),
        width=width,
        height=height,
    )


def assert_vec(vec, expected):
    assert np.allclose([vec.x, vec.y], expected), f"Expected {expected}, got {vec}"


def test_free_flight():
    """Away from the walls the step is plain explicit Euler"""
    state = make_state((100.0, 100.0), (0.5, -0.2), (0.0, -0.001))

    new_state = step(state, 10.0)

    # Position uses the old velocity
    assert_vec(new_state.position, (105.0, 98.0))
    assert_vec(new_state.velocity, (0.5, -0.21))


def test_fixed_fields_carried_over():
    state = make_state((100.0, 100.0), (0.5, -0.2), (0.0, -0.001), width=640, height=480)

    new_state = step(state, 10.0)

    assert new_state is not state
    assert new_state.acceleration == state.acceleration
    assert new_state.width == 640
    assert new_state.height == 480
    # Input untouched
    assert_vec(state.position, (100.0, 100.0))


def test_landing_exactly_on_wall_does_not_reflect():
    cases = [
        ((10.0, 100.0), (-1.0, 0.0), (0.0, 100.0)),
        ((790.0, 100.0), (1.0, 0.0), (800.0, 100.0)),
        ((100.0, 10.0), (0.0, -1.0), (100.0, 0.0)),
        ((100.0, 490.0), (0.0, 1.0), (100.0, 500.0)),
    ]
    for position, velocity, expected in cases:
        new_state = step(make_state(position, velocity), 10.0)
        assert_vec(new_state.position, expected)
        assert_vec(new_state.velocity, velocity)


def test_left_wall_reflection():
    state = make_state((5.0, 100.0), (-1.0, 0.3), (0.0, -0.001))

    new_state = step(state, 10.0)

    assert new_state.position.x == 0.0
    assert np.isclose(new_state.position.y, 103.0)
    assert np.isclose(new_state.velocity.x, 0.8)
    # y only sees gravity
    assert np.isclose(new_state.velocity.y, 0.29)


def test_right_wall_reflection():
    state = make_state((795.0, 100.0), (1.0, 0.0))

    new_state = step(state, 10.0)

    assert new_state.position.x == 800.0
    assert_vec(new_state.velocity, (-0.8, 0.0))


def test_floor_and_ceiling_reflection():
    floor = step(make_state((100.0, 5.0), (0.2, -1.0)), 10.0)
    assert floor.position.y == 0.0
    assert_vec(floor.velocity, (0.2, 0.8))

    ceiling = step(make_state((100.0, 495.0), (0.2, 1.0)), 10.0)
    assert ceiling.position.y == 500.0
    assert_vec(ceiling.velocity, (0.2, -0.8))


def test_corner_hit_applies_both_reflectors():
    state = make_state((5.0, 5.0), (-1.0, -1.0), (0.0, -0.001))

    new_state = step(state, 10.0)

    assert_vec(new_state.position, (0.0, 0.0))
    assert_vec(new_state.velocity, (0.8, 0.808))


def test_zero_dt_holds():
    state = make_state((123.0, 45.0), (0.3, -0.7), (0.0, -0.001))

    held = step(step(state, 0.0), 0.0)

    assert held.position == state.position
    assert held.velocity == state.velocity


def test_floor_bounce_end_to_end():
    state = make_state((0.5, 0.5), (0.0, -1.0), (0.0, -0.001))

    new_state = step(state, 10.0)

    assert new_state.position.y == 0.0
    assert np.isclose(new_state.velocity.y, 0.808)
    assert total_energy(new_state) < total_energy(state)


def test_missing_state():
    with pytest.raises(MissingStateError):
        step(None, 10.0)
    with pytest.raises(ValueError):
        SolverExplicitEuler().step(None, 10.0)


def test_invalid_dt():
    state = make_state((100.0, 100.0), (0.0, 0.0))
    with pytest.raises(ValueError):
        step(state, -1.0)
    with pytest.raises(ValueError):
        step(state, float("nan"))


def test_step_is_pure():
    state = make_state((5.0, 5.0), (-1.0, -1.0), (0.0, -0.001))
    assert step(state, 10.0) == step(state, 10.0)


def test_solver_restitution_and_bounce_count():
    solver = SolverExplicitEuler(restitution=1.0)
    state = make_state((5.0, 5.0), (-1.0, -1.0))

    new_state = solver.step(state, 10.0)

    assert_vec(new_state.velocity, (1.0, 1.0))
    assert solver.bounce_count == 2

    solver.step(make_state((100.0, 100.0), (0.1, 0.1)), 10.0)
    assert solver.bounce_count == 2


def test_invalid_restitution():
    with pytest.raises(ValueError):
        SolverExplicitEuler(restitution=1.5)


def test_apply_boundary_leaves_interior_alone():
    position, velocity = apply_boundary_2d(Vector2(1.0, 2.0), Vector2(3.0, 4.0), 10, 10)
    assert position == Vector2(1.0, 2.0)
    assert velocity == Vector2(3.0, 4.0)


def test_to_screen():
    state = make_state((50.0, 50.0), (0.0, 0.0))
    assert to_screen(state) == (50.0, 450.0)


def test_from_physical_units():
    state = SimulationState.from_physical_units()

    assert_vec(state.position, (50.0, 50.0))
    assert_vec(state.velocity, (0.1 * PX_PER_M / MS_PER_S, 0.3 * PX_PER_M / MS_PER_S))
    assert np.isclose(state.acceleration.y, -0.98 * 8221 / 1e6)
    assert (state.width, state.height) == (800, 500)


def test_state_validation():
    with pytest.raises(ValueError):
        make_state((0.0, 0.0), (0.0, 0.0), width=0)


def test_vector_ops():
    a = Vector2(1.0, 2.0)
    b = Vector2(0.5, -1.0)

    assert a + b == Vector2(1.5, 1.0)
    assert a.add(b) == a + b
    assert a * 2 == Vector2(2.0, 4.0)
    assert 2 * a == a.scalar_multiply(2)
    assert -a == Vector2(-1.0, -2.0)
    assert Vector2.from_numpy(a.to_numpy()) == a

    x, y = a
    assert (x, y) == (1.0, 2.0)
    assert tuple(b) == (0.5, -1.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        a.x = 5.0
    with pytest.raises(ValueError):
        Vector2.from_numpy([1.0, 2.0, 3.0])


def test_linear_map():
    reflect = LinearMap2([[-0.8, 0.0], [0.0, 1.0]])

    assert_vec(reflect.apply(Vector2(2.0, 3.0)), (-1.6, 3.0))
    assert reflect == LinearMap2([[-0.8, 0], [0, 1]])

    with pytest.raises(ValueError):
        reflect.matrix[0, 0] = 1.0
    with pytest.raises(AttributeError):
        reflect._matrix = None
    with pytest.raises(ValueError):
        LinearMap2([1.0, 0.0, 0.0])
