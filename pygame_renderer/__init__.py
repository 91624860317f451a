"""
Pygame Renderer for the Bouncing Ball.

This module provides the drawing surface used by:
- ball_env/bouncing_ball_env.py
- ball_demo/demo.py

Main classes:
- Renderer: pygame-based clear / fill style / filled circle drawing
"""

from .renderer import Renderer

__all__ = ['Renderer']
