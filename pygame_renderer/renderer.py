"""
Pygame Renderer for the Bouncing Ball

Implements the drawing surface the simulation needs:
1. clear(): wipe a region of the canvas
2. set_fill_style(): choose the fill color for later shapes
3. draw_filled_circle(): paint a disc at screen coordinates

Plus helpers for the ball itself, the box border and HUD text.

Usage:
    from pygame_renderer import Renderer

    renderer = Renderer(window_width=800, window_height=500)

    # In render loop:
    canvas = renderer.create_canvas()
    renderer.draw_ball(canvas, state)
    renderer.draw_border(canvas)
    renderer.draw_info_text(canvas, [("t=10ms", renderer.BLACK)])
"""

import numpy as np
import pygame
from typing import List, Optional, Tuple

from bouncing_ball.sim import SimulationState, to_screen


class Renderer:
    """
    Pygame renderer for bouncing ball visualization.

    All drawing methods take the target pygame Surface explicitly so the
    same renderer works for a window and for off-screen frames.
    """

    # ========================================================================
    # COLOR CONSTANTS
    # ========================================================================

    WHITE = (255, 255, 255)
    BLACK = (0, 0, 0)
    GREY = (128, 128, 128)

    BALL_COLOR = "#32a852"  # Green

    # ========================================================================
    # INITIALIZATION
    # ========================================================================

    def __init__(
        self,
        window_width: int = 800,
        window_height: int = 500,
        ball_radius: int = 10,
        ball_color=BALL_COLOR,
        border_width: int = 1,
        font_size_small: int = 18,
    ):
        """
        Initialize the renderer.

        Args:
            window_width: Window width in pixels
            window_height: Window height in pixels
            ball_radius: Ball disc radius in pixels
            ball_color: Ball fill color (hex string, name or RGB tuple)
            border_width: Box border width (0 disables the border)
            font_size_small: Small font size for HUD lines
        """
        self.window_width = window_width
        self.window_height = window_height
        self.ball_radius = ball_radius
        self.ball_color = pygame.Color(ball_color)
        self.border_width = border_width

        # Current fill style, as in a 2D canvas context
        self.fill_style = pygame.Color(*self.BLACK)

        # Fonts (initialized lazily)
        self._font_small = None
        self._font_size_small = font_size_small

    @property
    def font_small(self):
        """Lazy small font initialization."""
        if self._font_small is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_small = pygame.font.Font(None, self._font_size_small)
        return self._font_small

    # ========================================================================
    # COORDINATE CONVERSION
    # ========================================================================

    def world_to_screen(self, state: SimulationState) -> Tuple[int, int]:
        """Screen pixel of the ball (y flipped so the floor is at the bottom)."""
        x, y = to_screen(state)
        return (int(x), int(y))

    # ========================================================================
    # CANVAS CREATION
    # ========================================================================

    def create_canvas(self, background_color=None) -> pygame.Surface:
        """
        Create a new canvas (pygame Surface) with background color.

        Args:
            background_color: RGB tuple or None for white

        Returns:
            pygame.Surface
        """
        canvas = pygame.Surface((self.window_width, self.window_height))
        canvas.fill(background_color or self.WHITE)
        return canvas

    # ========================================================================
    # DRAWING SURFACE PRIMITIVES
    # ========================================================================

    def clear(self, canvas: pygame.Surface, region: Optional[pygame.Rect] = None, color=None):
        """
        Clear a region of the canvas.

        Args:
            canvas: pygame Surface to draw on
            region: Rect to clear, or None for the whole canvas
            color: Background color (default: white)
        """
        canvas.fill(color or self.WHITE, region)

    def set_fill_style(self, color):
        """Set the fill color used by subsequent shape calls."""
        self.fill_style = pygame.Color(color)

    def draw_filled_circle(self, canvas: pygame.Surface, x: float, y: float, radius: float):
        """Draw a disc with the current fill style centered at screen (x, y)."""
        pygame.draw.circle(canvas, self.fill_style, (int(x), int(y)), int(radius))

    # ========================================================================
    # BALL RENDERING
    # ========================================================================

    def draw_ball(self, canvas: pygame.Surface, state: SimulationState, clear: bool = True):
        """
        Draw the ball for a simulation state.

        Args:
            canvas: pygame Surface to draw on
            state: State whose position is drawn
            clear: Wipe the box area first
        """
        if not np.all(np.isfinite(state.position.to_numpy())):
            raise ValueError(f"Cannot draw ball at non-finite position {state.position}")

        if clear:
            self.clear(canvas, pygame.Rect(0, 0, int(state.width), int(state.height)))
        x, y = self.world_to_screen(state)
        self.set_fill_style(self.ball_color)
        self.draw_filled_circle(canvas, x, y, self.ball_radius)

    def draw_border(self, canvas: pygame.Surface, color=None):
        """Draw the box outline around the canvas."""
        if self.border_width <= 0:
            return
        pygame.draw.rect(
            canvas,
            color or self.GREY,
            pygame.Rect(0, 0, self.window_width, self.window_height),
            self.border_width,
        )

    # ========================================================================
    # TEXT
    # ========================================================================

    def draw_info_text(
        self,
        canvas: pygame.Surface,
        lines: List[Tuple[str, Tuple[int, int, int]]],
        position: Tuple[int, int] = (10, 10),
        line_spacing: int = 17,
    ):
        """
        Draw multiple lines of info text.

        Args:
            canvas: pygame Surface to draw on
            lines: List of (text, color) tuples
            position: Top-left position
            line_spacing: Vertical spacing between lines
        """
        x, y = position

        for i, (text, color) in enumerate(lines):
            text_surface = self.font_small.render(text, True, color)
            canvas.blit(text_surface, (x, y + i * line_spacing))
