import numpy as np
import gymnasium as gym
from gymnasium import spaces
import pygame

from bouncing_ball.sim import SimulationState, total_energy
from bouncing_ball.solvers import SolverExplicitEuler
from pygame_renderer import Renderer


class BouncingBallEnv(gym.Env):
    """
    Bouncing Ball Environment for Gymnasium.

    A point mass under constant gravity bouncing inside a box with lossy
    walls. The environment owns the current simulation state: ``step()`` is
    the only writer and ``render()`` only reads it.

    Architecture:
        - sim.SimulationState: Immutable snapshot (position, velocity, box)
        - solvers.SolverExplicitEuler: Time integration and wall reflection
        - pygame_renderer.Renderer: Drawing

    Units are px and ms. The ball takes no input, so the action space has a
    single no-op action.
    """

    metadata = {'render_modes': ['human', 'rgb_array'], 'render_fps': 60}

    # ========================================================================
    # INITIALIZATION
    # ========================================================================

    def __init__(
        self,
        render_mode=None,
        initial_state: SimulationState = None,
        dt=10.0,
        restitution=0.8,
        ball_radius=10,
        ball_color=Renderer.BALL_COLOR,
        show_info=False,
        render_fps=None,
    ):
        """
        Initialize the Bouncing Ball Environment.

        Args:
            render_mode: 'human', 'rgb_array', or None
            initial_state: Starting state (default: the standard 800x500 box)
            dt: Physics timestep in ms
            restitution: Fraction of velocity kept after a wall hit
            ball_radius: Ball radius in pixels
            ball_color: Ball fill color
            show_info: Draw a HUD with time, energy and bounce count
            render_fps: Frame rate cap for human rendering (default: 60)

        Examples:
            >>> env = BouncingBallEnv()
            >>> env = BouncingBallEnv(render_mode='rgb_array', dt=5.0)
        """
        super(BouncingBallEnv, self).__init__()

        if not np.isfinite(dt) or dt <= 0:
            raise ValueError(f"dt must be a positive number of ms, got {dt}")

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        if render_fps is not None:
            self.metadata = dict(self.metadata, render_fps=render_fps)

        self.initial_state = initial_state or SimulationState.from_physical_units()
        self.dt = dt
        self.restitution = restitution
        self.show_info = show_info

        # The window matches the box, one pixel per simulation unit
        self.window_width = int(self.initial_state.width)
        self.window_height = int(self.initial_state.height)
        self.window = None
        self.clock = None

        self.renderer = Renderer(
            window_width=self.window_width,
            window_height=self.window_height,
            ball_radius=ball_radius,
            ball_color=ball_color,
        )

        self.solver = SolverExplicitEuler(restitution=restitution)

        self.action_space = spaces.Discrete(1)
        self.observation_space = spaces.Box(
            low=-np.inf,
            high=np.inf,
            shape=(4,),
            dtype=np.float64,
        )

        self.state = self.initial_state
        self.t = 0.0
        self.steps = 0

    # ========================================================================
    # ENVIRONMENT INTERFACE (Gymnasium API)
    # ========================================================================

    def reset(self, seed=None, options=None):
        """Reset the environment to its initial state"""
        super().reset(seed=seed)

        self.solver = SolverExplicitEuler(restitution=self.restitution)
        self.state = self.initial_state
        self.t = 0.0
        self.steps = 0

        return self._get_obs(), self._get_info()

    def step(self, action=0):
        """Advance the simulation by one fixed timestep"""
        self.state = self.solver.step(self.state, self.dt)
        self.t += self.dt
        self.steps += 1

        return self._get_obs(), 0.0, False, False, self._get_info()

    # ========================================================================
    # STATE & OBSERVATION METHODS
    # ========================================================================

    def _get_obs(self):
        return np.array([*self.state.position, *self.state.velocity], dtype=np.float64)

    def _get_info(self):
        return {
            'time': self.t,
            'steps': self.steps,
            'bounces': self.solver.bounce_count,
            'total_energy': total_energy(self.state),
        }

    # ========================================================================
    # RENDERING
    # ========================================================================

    def render(self):
        """Public rendering interface"""
        if self.render_mode is None:
            return
        return self._render_frame()

    def _render_frame(self):
        """Draw the current state and either display or return it"""
        self._init_window()

        canvas = self.renderer.create_canvas()
        self.renderer.draw_ball(canvas, self.state)
        self.renderer.draw_border(canvas)
        if self.show_info:
            self._draw_ui_text(canvas)

        return self._finalize_render(canvas)

    def _init_window(self):
        """Initialize pygame window for human rendering mode"""
        if self.render_mode == "human" and self.window is None:
            pygame.init()
            pygame.display.init()
            self.window = pygame.display.set_mode((self.window_width, self.window_height))
            pygame.display.set_caption("Bouncing Ball")
        if self.render_mode == "human" and self.clock is None:
            self.clock = pygame.time.Clock()

    def _draw_ui_text(self, canvas):
        """Draw UI text (time, energy, bounces)"""
        lines = [
            (f"Time: {self.t / 1000.0:.2f}s", self.renderer.BLACK),
            (f"Energy: {total_energy(self.state):.4f} px^2/ms^2", self.renderer.BLACK),
            (f"Bounces: {self.solver.bounce_count}", self.renderer.GREY),
        ]
        self.renderer.draw_info_text(canvas, lines, position=(10, 10), line_spacing=20)

    def _finalize_render(self, canvas):
        if self.render_mode == "human":
            self.window.blit(canvas, canvas.get_rect())
            pygame.event.pump()
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None
        else:  # rgb_array mode
            return np.transpose(np.array(pygame.surfarray.pixels3d(canvas)), axes=(1, 0, 2))

    # ========================================================================
    # CLEANUP
    # ========================================================================

    def close(self):
        if self.window is not None:
            pygame.display.quit()
            pygame.quit()
            self.window = None
            self.clock = None
