"""
slater-ops: sparse Slater-determinant states and second-quantized operators.
"""

from .fermion import (
    MAX_MODES,
    Annihilate,
    Create,
    Determinant,
    DeterminantError,
    Operator,
    Term,
    excitation_operator,
    number_operator,
)
from .state import AMPLITUDE_TOL, State, apply_operator

__all__ = [
    "MAX_MODES",
    "AMPLITUDE_TOL",
    "Determinant",
    "DeterminantError",
    "Create",
    "Annihilate",
    "Term",
    "Operator",
    "number_operator",
    "excitation_operator",
    "State",
    "apply_operator",
]
