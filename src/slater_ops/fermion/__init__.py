"""
Fermionic building blocks in second quantization.

This subpackage holds the determinant encoding, the elementary ladder
operators and operator sums, and Hamiltonian construction from integrals.

Main Entry Points
-----------------
Determinant : Slater determinant as an occupation bitmask
    Built from a raw index or from an explicit list of occupied modes.

Operator : Weighted sum of ladder-operator products
    Terms are written left to right and act right to left.

hamiltonian_operator : Build a Hamiltonian from pre-computed integrals
    Requires one- and two-electron integrals in the spin-orbital basis.

hamiltonian_from_pyscf : Build a Hamiltonian directly from PySCF output
    Handles AO->MO transformation and BLOCK spin expansion.

Examples
--------
>>> from slater_ops.fermion import Determinant, Operator, Create, Annihilate
>>> d = Determinant.from_occupied([0, 1, 2])
>>> d.apply(Annihilate(1))
(-1, Determinant(0b101))
"""

from .fermion_ops import MAX_MODES
from .determinant import Determinant, DeterminantError
from .operator import (
    Annihilate,
    Create,
    Operator,
    Term,
    excitation_operator,
    n_modes_of,
    number_operator,
)
from .hamiltonian import hamiltonian_operator, spin_expand_1e, spin_expand_2e_phys
from .pyscf_glue import hamiltonian_from_pyscf, mo_integrals

__all__ = [
    "MAX_MODES",
    "Determinant",
    "DeterminantError",
    "Create",
    "Annihilate",
    "Term",
    "Operator",
    "number_operator",
    "excitation_operator",
    "n_modes_of",
    "hamiltonian_operator",
    "spin_expand_1e",
    "spin_expand_2e_phys",
    "hamiltonian_from_pyscf",
    "mo_integrals",
]
