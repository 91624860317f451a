"""
Tests for the bouncing ball demo driver.

Headless runs step only the physics; the windowed run uses SDL's dummy
video driver so no real display is needed.
"""

import os
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from ball_demo import BouncingBallDemo, DemoConfig
from ball_demo.demo import parse_args
from bouncing_ball import MissingStateError


def test_headless_run():
    demo = BouncingBallDemo(DemoConfig(headless=True, duration=1.0))

    summary = demo.run()

    assert summary['steps'] == 100
    assert summary['frames'] == 0
    assert summary['duration'] == pytest.approx(1.0)
    x, y = summary['final_position']
    assert 0.0 <= x <= 800.0
    assert 0.0 <= y <= 500.0


def test_headless_run_needs_duration():
    demo = BouncingBallDemo(DemoConfig(headless=True))
    with pytest.raises(ValueError):
        demo.run()


def test_initial_state_from_config():
    cfg = DemoConfig(position=(10.0, 20.0), velocity=(0.0, 0.0), width=300, height=200)

    state = cfg.initial_state()

    assert (state.position.x, state.position.y) == (10.0, 20.0)
    assert (state.velocity.x, state.velocity.y) == (0.0, 0.0)
    assert (state.width, state.height) == (300, 200)


def test_parse_args():
    args = parse_args([
        '--headless', '--duration', '0.5',
        '--velocity', '0', '0.2',
        '--width', '400',
        '-e', '0.5',
    ])
    cfg = DemoConfig.from_args(args)

    assert cfg.headless
    assert cfg.duration == 0.5
    assert cfg.velocity == (0.0, 0.2)
    assert cfg.width == 400
    assert cfg.height == 500
    assert cfg.restitution == 0.5
    assert cfg.interval_ms == 10


def test_parse_args_headless_without_duration():
    with pytest.raises(SystemExit):
        parse_args(['--headless'])


def test_missing_state_stops_physics():
    demo = BouncingBallDemo(DemoConfig(headless=True, duration=0.1))
    demo.setup()
    demo.env.state = None

    with pytest.raises(MissingStateError):
        demo.step()


def test_windowed_run():
    demo = BouncingBallDemo(DemoConfig(duration=0.2, show_info=True))

    summary = demo.run()

    assert summary['frames'] > 0
    # About 20 physics ticks at 10 ms; loose bound for timer jitter
    assert 0 < summary['steps'] <= 40
    assert demo.env.window is None
