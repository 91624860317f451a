# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Energy diagnostics (per unit mass, px^2/ms^2)

import numpy as np

from .state import SimulationState


def kinetic_energy(state: SimulationState) -> float:
    vel = state.velocity.to_numpy()
    return 0.5 * float(np.dot(vel, vel))


def potential_energy(state: SimulationState) -> float:
    """Potential of the uniform field, zero at the origin."""
    return -float(np.dot(state.acceleration.to_numpy(), state.position.to_numpy()))


def total_energy(state: SimulationState) -> float:
    return kinetic_energy(state) + potential_energy(state)
