# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Solvers module for the bouncing ball simulation

from .solver import MissingStateError, SolverBase
from .explicit_euler import SolverExplicitEuler, apply_boundary_2d, step

__all__ = [
    "SolverBase",
    "SolverExplicitEuler",
    "MissingStateError",
    "apply_boundary_2d",
    "step",
]
