import numpy as np
from scipy.linalg import eigh
from scipy.sparse import csr_matrix
from scipy.sparse.linalg import eigsh

from .fermion.determinant import Determinant
from .fermion.operator import Operator
from .state import State


def expectation(op: Operator, state: State) -> float:
    """
    Rayleigh quotient <psi|op|psi> / <psi|psi>.

    The state does not need to be normalized.

    Raises
    ------
    ValueError
        If ``state`` is empty.
    """
    norm2 = state.inner(state)
    if norm2 == 0.0:
        raise ValueError("Expectation value of the zero state is undefined")
    return state.inner(state.apply(op)) / norm2


def subspace_energy(op: Operator, determinants):
    """
    Lowest eigenvalue of ``op`` projected onto the span of ``determinants``.

    Builds the subspace matrix <d_i|op|d_j> by applying ``op`` to each
    determinant and keeping the components that land back in the subspace,
    then diagonalizes it.

    Parameters
    ----------
    op : Operator
        Hermitian operator, typically a Hamiltonian.
    determinants : iterable of Determinant or int
        Basis of the subspace. Duplicates are ignored.

    Returns
    -------
    E0 : float
        Lowest eigenvalue.
    psi0 : State
        Corresponding eigenvector expanded over ``determinants``.

    Notes
    -----
    - For small subspaces (<=2 dimensions), uses dense eigenvalue solver
    - For larger subspaces, uses sparse eigenvalue solver (eigsh)
    """
    dets = list(dict.fromkeys(
        d if isinstance(d, Determinant) else Determinant(d) for d in determinants
    ))
    if not dets:
        raise ValueError("Subspace must contain at least one determinant")
    pos = {d: i for i, d in enumerate(dets)}

    rows, cols, data = [], [], []
    for j, det in enumerate(dets):
        for bra, amp in State([(det, 1.0)]).apply(op).items():
            i = pos.get(bra)
            if i is not None:
                rows.append(i)
                cols.append(j)
                data.append(amp)
    n = len(dets)
    H_sub = csr_matrix((data, (rows, cols)), shape=(n, n))

    # Handle small matrices where eigsh would fail
    if n <= 2:
        eigenvalues, eigenvectors = eigh(H_sub.toarray())
        E0, vec = eigenvalues[0], eigenvectors[:, 0]
    else:
        E0, psi0 = eigsh(H_sub, k=1, which='SA')
        E0, vec = E0[0], psi0[:, 0]

    return float(E0), State(zip(dets, vec))
