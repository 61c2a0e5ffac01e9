import numpy as np
import pytest

pytest.importorskip("qiskit")

from qiskit.quantum_info import Statevector

from slater_ops import State
from slater_ops.statevector import state_from_statevector, state_to_statevector

pytestmark = pytest.mark.qiskit


def test_little_endian_modes():
    # label "011": qubits 0 and 1 set -> modes 0 and 1 occupied
    sv = Statevector.from_label("011")
    assert state_from_statevector(sv).as_dict() == {3: 1.0}


def test_roundtrip():
    psi = State([(3, 0.6), (5, -0.8)])
    sv = state_to_statevector(psi, 3)
    assert sv.num_qubits == 3
    assert np.isclose(sv.probabilities_dict()["011"], 0.36)
    assert state_from_statevector(sv) == psi


def test_complex_amplitudes_rejected():
    sv = Statevector(np.array([1.0, 1.0j]) / np.sqrt(2))
    with pytest.raises(ValueError):
        state_from_statevector(sv)
