"""
Gymnasium environment for the bouncing ball.

    import gymnasium as gym
    import ball_env

    env = gym.make("BouncingBall-v0", render_mode="rgb_array")
"""

from gymnasium.envs.registration import register

from .bouncing_ball_env import BouncingBallEnv

register(
    id="BouncingBall-v0",
    entry_point="ball_env.bouncing_ball_env:BouncingBallEnv",
)

__all__ = ['BouncingBallEnv']
