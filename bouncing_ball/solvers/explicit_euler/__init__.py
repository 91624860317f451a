# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0

from .solver_explicit_euler import SolverExplicitEuler, integrate_explicit_euler, step
from .kernels_boundary import (
    REFLECT_HORIZONTALLY,
    REFLECT_VERTICALLY,
    RESTITUTION,
    apply_boundary_2d,
    make_reflectors,
)

__all__ = [
    "SolverExplicitEuler",
    "integrate_explicit_euler",
    "step",
    "apply_boundary_2d",
    "make_reflectors",
    "REFLECT_HORIZONTALLY",
    "REFLECT_VERTICALLY",
    "RESTITUTION",
]
