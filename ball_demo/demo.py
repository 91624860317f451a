#!/usr/bin/env python3
"""
Bouncing Ball Demo

Runs the simulation on two independent cadences sharing one event loop:
- a fixed-period pygame timer (10 ms) that steps the physics
- a per-frame render capped at the display rate

Usage:
    python -m ball_demo
    python -m ball_demo --velocity 0.2 0.5
    python -m ball_demo --headless --duration 5

Author: NBEL
License: Apache-2.0
"""

import argparse
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np
import pygame

from ball_env import BouncingBallEnv
from bouncing_ball.sim import SimulationState, total_energy
from pygame_renderer import Renderer


@dataclass
class DemoConfig:
    """Configuration for the bouncing ball demo."""
    # Initial conditions (position in px, the rest in SI units)
    position: Tuple[float, float] = (50.0, 50.0)
    velocity: Tuple[float, float] = (0.1, 0.3)
    acceleration: Tuple[float, float] = (0.0, -0.98)

    # Box
    width: int = 800
    height: int = 500

    # Physics
    interval_ms: int = 10
    restitution: float = 0.8

    # Display
    ball_radius: int = 10
    ball_color: str = Renderer.BALL_COLOR
    render_fps: int = 60
    show_info: bool = False

    # Simulation
    duration: Optional[float] = None  # seconds, None runs until the window closes
    headless: bool = False
    progress_interval: int = 100  # physics steps between progress lines

    def initial_state(self) -> SimulationState:
        return SimulationState.from_physical_units(
            position=self.position,
            velocity=self.velocity,
            acceleration=self.acceleration,
            width=self.width,
            height=self.height,
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "DemoConfig":
        """Build a config from parsed command-line arguments."""
        return cls(
            position=tuple(args.position),
            velocity=tuple(args.velocity),
            acceleration=tuple(args.acceleration),
            width=args.width,
            height=args.height,
            interval_ms=args.interval,
            restitution=args.restitution,
            ball_radius=args.radius,
            ball_color=args.color,
            render_fps=args.fps,
            show_info=args.show_info,
            duration=args.duration,
            headless=args.headless,
        )


class BouncingBallDemo:
    """
    Bouncing ball demo driver.

    The physics timer is the only writer of ``env.state``; the frame
    callback only reads it. Both run on the pygame event loop, so they never
    interleave and no locking is needed. Frames may repeat a state or skip
    intermediate ones.

    Example:
        demo = BouncingBallDemo(DemoConfig(duration=10.0))
        summary = demo.run()
    """

    def __init__(self, config: Optional[DemoConfig] = None):
        """
        Initialize the demo.

        Args:
            config: Demo configuration (uses defaults if None)
        """
        self.config = config or DemoConfig()

        # Will be initialized in setup()
        self.env: Optional[BouncingBallEnv] = None
        self.physics_event: Optional[int] = None

        # State tracking
        self.frame_count: int = 0
        self.running: bool = True
        self.initial_energy: float = 0.0

    def get_demo_name(self) -> str:
        cfg = self.config
        return f"BOUNCING BALL - {cfg.width}x{cfg.height}px, e={cfg.restitution}"

    def setup(self) -> None:
        """Create the environment (and the window unless headless)."""
        cfg = self.config

        print("=" * 70)
        print(self.get_demo_name())
        print("=" * 70)
        print()

        self.env = BouncingBallEnv(
            render_mode=None if cfg.headless else "human",
            initial_state=cfg.initial_state(),
            dt=float(cfg.interval_ms),
            restitution=cfg.restitution,
            ball_radius=cfg.ball_radius,
            ball_color=cfg.ball_color,
            show_info=cfg.show_info,
            render_fps=cfg.render_fps,
        )
        self.env.reset()
        self.initial_energy = total_energy(self.env.state)

        state = self.env.state
        print(f"  Position: ({state.position.x:.1f}, {state.position.y:.1f}) px")
        print(f"  Velocity: ({state.velocity.x:.4f}, {state.velocity.y:.4f}) px/ms")
        print(f"  Acceleration: ({state.acceleration.x:.6f}, {state.acceleration.y:.6f}) px/ms^2")
        print(f"  Physics interval: {cfg.interval_ms} ms")
        print()

        if not cfg.headless:
            # Opens the window so the timer has an event queue to post to
            self.env.render()
            self.physics_event = pygame.event.custom_type()
            pygame.time.set_timer(self.physics_event, cfg.interval_ms)

    def step(self) -> None:
        """Physics timer callback: advance one fixed interval."""
        self.env.step(0)

        if self.env.steps % self.config.progress_interval == 0:
            state = self.env.state
            x, y = state.position
            print(
                f"t={self.env.t:.0f}ms | x={x:7.2f} | "
                f"y={y:7.2f} | E={total_energy(state):.4f} | "
                f"bounces={self.env.solver.bounce_count}"
            )

    def render(self) -> None:
        """Frame callback: draw the latest state."""
        self.env.render()
        self.frame_count += 1

    def handle_events(self) -> None:
        """Dispatch pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == self.physics_event:
                self.step()

    def get_summary(self) -> Dict[str, Any]:
        state = self.env.state
        return {
            'duration': self.env.t / 1000.0,
            'steps': self.env.steps,
            'frames': self.frame_count,
            'bounces': self.env.solver.bounce_count,
            'final_position': tuple(state.position),
            'energy_lost': self.initial_energy - total_energy(state),
        }

    def _run_headless(self) -> None:
        cfg = self.config
        if cfg.duration is None:
            raise ValueError("Headless runs need a duration")
        n_steps = int(np.ceil(cfg.duration * 1000.0 / cfg.interval_ms))
        for _ in range(n_steps):
            self.step()

    def _run_windowed(self) -> None:
        cfg = self.config
        start_time = time.monotonic()

        while self.running:
            self.handle_events()
            if not self.running:
                break
            self.render()

            if cfg.duration is not None and time.monotonic() - start_time >= cfg.duration:
                break

    def run(self) -> Dict[str, Any]:
        """
        Run the demo.

        Returns:
            Summary dictionary with simulation results
        """
        self.setup()

        print("=" * 70)
        print("SIMULATION STARTED")
        print("=" * 70)
        if not self.config.headless:
            print("Close the window to quit")
        print()

        try:
            if self.config.headless:
                self._run_headless()
            else:
                self._run_windowed()
        finally:
            if self.physics_event is not None:
                pygame.time.set_timer(self.physics_event, 0)
            self.env.close()

        summary = self.get_summary()

        print()
        print("=" * 70)
        print("SIMULATION COMPLETE")
        print("=" * 70)
        print(f"  Simulated time: {summary['duration']:.2f}s ({summary['steps']} steps)")
        print(f"  Frames drawn: {summary['frames']}")
        print(f"  Wall bounces: {summary['bounces']}")
        print(f"  Energy lost: {summary['energy_lost']:.4f} px^2/ms^2")
        print()

        return summary

    @classmethod
    def add_common_args(cls, parser: argparse.ArgumentParser) -> None:
        """Add command-line arguments to parser."""
        defaults = DemoConfig()
        parser.add_argument('--position', type=float, nargs=2, default=list(defaults.position),
                            metavar=('X', 'Y'), help='Initial position in px (default: 50 50)')
        parser.add_argument('--velocity', type=float, nargs=2, default=list(defaults.velocity),
                            metavar=('VX', 'VY'), help='Initial velocity in m/s (default: 0.1 0.3)')
        parser.add_argument('--acceleration', type=float, nargs=2, default=list(defaults.acceleration),
                            metavar=('AX', 'AY'), help='Acceleration in m/s^2 (default: 0 -0.98)')
        parser.add_argument('--width', type=int, default=defaults.width,
                            help='Box width in px (default: 800)')
        parser.add_argument('--height', type=int, default=defaults.height,
                            help='Box height in px (default: 500)')
        parser.add_argument('--interval', type=int, default=defaults.interval_ms,
                            help='Physics interval in ms (default: 10)')
        parser.add_argument('--restitution', '-e', type=float, default=defaults.restitution,
                            help='Coefficient of restitution (default: 0.8)')
        parser.add_argument('--radius', type=int, default=defaults.ball_radius,
                            help='Ball radius in px (default: 10)')
        parser.add_argument('--color', type=str, default=defaults.ball_color,
                            help='Ball color (default: #32a852)')
        parser.add_argument('--fps', type=int, default=defaults.render_fps,
                            help='Render frame rate cap (default: 60)')
        parser.add_argument('--duration', '-t', type=float, default=None,
                            help='Duration in seconds (default: run until closed)')
        parser.add_argument('--headless', action='store_true',
                            help='Step the physics without a window (needs --duration)')
        parser.add_argument('--show-info', action='store_true',
                            help='Draw time, energy and bounce count')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Bouncing Ball Demo')
    BouncingBallDemo.add_common_args(parser)
    args = parser.parse_args(argv)
    if args.headless and args.duration is None:
        parser.error('--headless requires --duration')
    return args


def main(argv=None):
    args = parse_args(argv)
    demo = BouncingBallDemo(DemoConfig.from_args(args))
    demo.run()


if __name__ == "__main__":
    main()
