"""
Dense and sparse views of states and operators in the full Fock space.

The Fock space over ``n_modes`` spin orbitals has dimension ``2**n_modes`` and
basis vector ``k`` is the determinant with ``index == k``, so these views line
up with the integer-indexed basis used throughout the package.
"""
import numpy as np
from line_profiler import profile
from scipy.sparse import coo_matrix, csr_matrix

from .fermion.determinant import Determinant
from .fermion.operator import Operator, n_modes_of
from .state import AMPLITUDE_TOL, State


def _check_n_modes(n_modes: int, needed: int):
    if n_modes < needed:
        raise ValueError(f"n_modes={n_modes} too small, need at least {needed}")


def state_to_vector(state: State, n_modes: int) -> np.ndarray:
    """
    Dense real amplitude vector of length ``2**n_modes``.

    Raises
    ------
    ValueError
        If a determinant of ``state`` occupies a mode ``>= n_modes``.
    """
    needed = max((d.index.bit_length() for d in state), default=0)
    _check_n_modes(n_modes, needed)
    vec = np.zeros(1 << n_modes, dtype=np.float64)
    for det, amp in state.items():
        vec[det.index] = amp
    return vec


def state_from_vector(vec, tol: float = 1e-12) -> State:
    """Sparse State from a dense real vector, dropping ``|amp| <= tol``."""
    vec = np.asarray(vec)
    if np.iscomplexobj(vec):
        if np.any(np.abs(vec.imag) > tol):
            raise ValueError("State amplitudes must be real")
        vec = vec.real
    idx = np.argwhere(np.abs(vec) > tol).ravel()
    return State(((int(i), float(vec[i])) for i in idx), tol=tol)


@profile
def operator_matrix(op: Operator, n_modes: int = None) -> csr_matrix:
    """
    Build the sparse Fock-space matrix of an operator.

    Column ``ket`` holds ``op |ket>`` for every basis determinant, so
    ``operator_matrix(op) @ state.to_vector(n)`` reproduces
    ``state.apply(op).to_vector(n)``.

    Parameters
    ----------
    op : Operator
        Operator to represent.
    n_modes : int, optional
        Number of spin orbitals. Defaults to the smallest number that covers
        every mode ``op`` acts on.

    Returns
    -------
    scipy.sparse.csr_matrix
        Matrix of shape ``(2**n_modes, 2**n_modes)``.
    """
    needed = n_modes_of(op)
    if n_modes is None:
        n_modes = needed
    _check_n_modes(n_modes, needed)
    dim = 1 << n_modes

    rows, cols, data = [], [], []
    for ket in range(dim):
        column = State._from_dict({Determinant(ket): 1.0}).apply(op, tol=AMPLITUDE_TOL)
        for bra, amp in column.items():
            rows.append(bra.index)
            cols.append(ket)
            data.append(amp)

    return coo_matrix((data, (rows, cols)), shape=(dim, dim), dtype=np.float64).tocsr()
