"""
Conversion between sparse States and qiskit statevectors.

Qiskit orders qubits little-endian, so qubit ``j`` is mode ``j`` and the
statevector index of a determinant is its ``index``.
"""
import numpy as np
from qiskit.quantum_info import Statevector

from .matrix import state_from_vector, state_to_vector
from .state import State


def state_to_statevector(state: State, n_modes: int) -> Statevector:
    """Embed ``state`` in an ``n_modes``-qubit statevector (not renormalized)."""
    return Statevector(state_to_vector(state, n_modes).astype(np.complex128))


def state_from_statevector(statevector: Statevector, tol: float = 1e-12) -> State:
    """
    Sparse State from a qiskit statevector.

    Amplitudes with magnitude <= ``tol`` are dropped.

    Raises
    ------
    ValueError
        If any amplitude has an imaginary part larger than ``tol``.
    """
    return state_from_vector(np.asarray(statevector.data), tol=tol)
