"""
Second-quantized electronic Hamiltonians built from MO integrals.

    H = sum_pq h_pq a_p† a_q + 1/2 sum_pqrs <pq|rs> a_p† a_q† a_s a_r + E_nuc

Spin orbitals use BLOCK ordering: [α0..α(n-1), β0..β(n-1)].
"""
import numpy as np

from .operator import Annihilate, Create, Operator, Term


def spin_expand_1e(h1_spatial: np.ndarray) -> np.ndarray:
    """
    Expand spatial 1e integrals (n,n) into spin-orbital (2n,2n) in BLOCK order.
    Cross-spin blocks are zero.
    """
    return np.kron(np.eye(2, dtype=h1_spatial.dtype), h1_spatial)


def spin_expand_2e_phys(g_phys: np.ndarray) -> np.ndarray:
    """
    Expand spatial 2e integrals in physicist order <pq|rs> into spin orbitals.
    Nonzero only when spin(P)==spin(R) and spin(Q)==spin(S).
    Returns G[P,Q,R,S] with shape (2n,2n,2n,2n).
    """
    n = g_phys.shape[0]
    G = np.zeros((2*n,) * 4, dtype=g_phys.dtype)
    for s1 in (slice(0, n), slice(n, 2*n)):
        for s2 in (slice(0, n), slice(n, 2*n)):
            G[s1, s2, s1, s2] = g_phys
    return G


def hamiltonian_operator(h1, g2_phys, enuc: float = 0.0, tol: float = 1e-16) -> Operator:
    """Build the electronic Hamiltonian as an ``Operator``.

    Parameters
    ----------
    h1 : ndarray
        One-electron integrals matrix of shape (N, N).
    g2_phys : ndarray
        Two-electron integrals tensor in physicist notation of shape (N, N, N, N).
    enuc : float, optional
        Nuclear repulsion energy, by default 0.0.
    tol : float, optional
        Integrals with magnitude at or below ``tol`` are skipped.

    Returns
    -------
    Operator
        One term per retained integral, plus an identity term for ``enuc``.
    """
    h1 = np.asarray(h1)
    g2_phys = np.asarray(g2_phys)
    N = h1.shape[0]
    if h1.shape != (N, N) or g2_phys.shape != (N,) * 4:
        raise ValueError(f"Integral shapes {h1.shape} and {g2_phys.shape} do not match")
    if np.iscomplexobj(h1) or np.iscomplexobj(g2_phys):
        raise ValueError("Integrals must be real")

    terms = []
    for p, q in np.argwhere(np.abs(h1) > tol):
        terms.append(Term(float(h1[p, q]), (Create(int(p)), Annihilate(int(q)))))

    for p, q, r, s in np.argwhere(np.abs(g2_phys) > tol):
        # a_p† a_q† vanishes for p == q, as does a_s a_r for r == s
        if p == q or r == s:
            continue
        ops = (Create(int(p)), Create(int(q)), Annihilate(int(s)), Annihilate(int(r)))
        terms.append(Term(0.5 * float(g2_phys[p, q, r, s]), ops))

    if enuc != 0.0:
        terms.append(Term(float(enuc), ()))

    return Operator(terms)
