# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0

from .vector import LinearMap2, Vector2
from .state import MS_PER_S, PX_PER_M, SimulationState, to_screen
from .energy import kinetic_energy, potential_energy, total_energy

__all__ = [
    "Vector2",
    "LinearMap2",
    "SimulationState",
    "to_screen",
    "PX_PER_M",
    "MS_PER_S",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
]
