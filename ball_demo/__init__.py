"""
Bouncing Ball Demo

Windowed and headless drivers for the bouncing ball simulation.

Architecture:
- DemoConfig: All tunables (initial conditions, box, timing, display)
- BouncingBallDemo: Physics timer + frame loop around BouncingBallEnv

Author: NBEL
License: Apache-2.0
"""

from .demo import BouncingBallDemo, DemoConfig, main

__all__ = [
    'BouncingBallDemo',
    'DemoConfig',
    'main',
]
