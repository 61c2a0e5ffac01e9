"""
Total-spin operators in second quantization.

Spin orbitals use BLOCK ordering: alpha orbitals occupy modes [0, M-1] and
beta orbitals modes [M, 2M-1].
"""
from functools import reduce
from operator import add

from .fermion.operator import Operator, excitation_operator, number_operator


def spin_ops(n_spatial_orbs: int):
    """
    Build the total spin operators S_z, S_+, and S_-.

    Parameters
    ----------
    n_spatial_orbs : int
        Number of spatial orbitals (M). The total number of spin
        orbitals (modes) is 2*M.

    Returns
    -------
    Sz : Operator
        S_z = (1/2) * sum_p (n_pα - n_pβ).
    Splus : Operator
        S_+ = sum_p a^dagger_pα a_pβ.
    Sminus : Operator
        S_- = sum_p a^dagger_pβ a_pα.
    """
    M = n_spatial_orbs
    if M < 1:
        raise ValueError("n_spatial_orbs must be positive")

    Sz = reduce(add, (
        number_operator(p, 0.5) + number_operator(M + p, -0.5) for p in range(M)
    ))
    Splus = reduce(add, (excitation_operator(p, M + p) for p in range(M)))
    Sminus = reduce(add, (excitation_operator(M + p, p) for p in range(M)))
    return Sz, Splus, Sminus


def total_spin_S2(n_spatial_orbs: int) -> Operator:
    """
    Total spin squared, S^2 = S_- S_+ + S_z^2 + S_z.

    Closed-shell determinants have <S^2> = 0; a single high-spin determinant
    with n unpaired alpha electrons has <S^2> = (n/2)(n/2 + 1).
    """
    Sz, Splus, Sminus = spin_ops(n_spatial_orbs)
    return Sminus * Splus + Sz * Sz + Sz
