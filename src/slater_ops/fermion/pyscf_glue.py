import numpy as np
from line_profiler import profile
from pyscf import ao2mo

from .hamiltonian import hamiltonian_operator, spin_expand_1e, spin_expand_2e_phys


def mo_integrals(mol, rhf):
    """
    Spatial MO integrals of an RHF calculation.

    Returns
    -------
    h1 : ndarray (n, n)
        Core Hamiltonian in the MO basis.
    g_phys : ndarray (n, n, n, n)
        Two-electron integrals in physicist order <pq|rs> = (pr|qs).
    """
    C = rhf.mo_coeff
    nmo = C.shape[1]
    h1 = C.T @ rhf.get_hcore() @ C
    eri = ao2mo.restore(1, ao2mo.full(mol, C), nmo)  # chemist (pq|rs)
    return h1, np.transpose(eri, (0, 2, 1, 3))


@profile
def hamiltonian_from_pyscf(mol, rhf, tol: float = 1e-16):
    """
    Return the spin-orbital Hamiltonian ``Operator`` for a PySCF RHF object.
    BLOCK spin ordering: [α0..α(n-1), β0..β(n-1)], so the RHF determinant
    occupies modes ``range(nocc)`` and ``nmo + range(nocc)``.
    """
    h1, g_phys = mo_integrals(mol, rhf)
    return hamiltonian_operator(
        spin_expand_1e(h1), spin_expand_2e_phys(g_phys), enuc=mol.energy_nuc(), tol=tol
    )
