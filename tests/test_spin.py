import pytest

from slater_ops import Determinant, State
from slater_ops.energy import expectation
from slater_ops.spin import spin_ops, total_spin_S2


def det_state(*occupied):
    return State([(Determinant.from_occupied(occupied), 1.0)])


def test_sz_values():
    Sz, _, _ = spin_ops(2)
    # BLOCK ordering with M=2: α0, α1 = modes 0, 1; β0, β1 = modes 2, 3
    assert expectation(Sz, det_state(0, 1)) == pytest.approx(1.0)
    assert expectation(Sz, det_state(0, 2)) == pytest.approx(0.0)
    assert expectation(Sz, det_state(2)) == pytest.approx(-0.5)


def test_splus_raises_spin():
    _, Splus, Sminus = spin_ops(2)
    # S_+ |α0 β1> = |α0 α1> (net phase +1)
    assert det_state(0, 3).apply(Splus).as_dict() == {0b0011: 1.0}
    # S_- on the fully polarised state has two components
    out = det_state(0, 1).apply(Sminus).as_dict()
    assert out == {0b0110: -1.0, 0b1001: 1.0}


def test_s2_closed_shell_is_singlet():
    S2 = total_spin_S2(2)
    assert expectation(S2, det_state(0, 2)) == pytest.approx(0.0)
    assert expectation(S2, det_state(0, 1, 2, 3)) == pytest.approx(0.0)


def test_s2_high_spin_triplet():
    S2 = total_spin_S2(2)
    assert expectation(S2, det_state(0, 1)) == pytest.approx(2.0)
    assert expectation(S2, det_state(2, 3)) == pytest.approx(2.0)


def test_s2_open_shell_determinant_is_mixed():
    S2 = total_spin_S2(2)
    assert expectation(S2, det_state(0, 3)) == pytest.approx(1.0)
    # with modes ordered α0 α1 β0 β1 the sum is the singlet, the difference the triplet
    a = Determinant.from_occupied([0, 3])
    b = Determinant.from_occupied([1, 2])
    singlet = State([(a, 1.0), (b, 1.0)])
    triplet = State([(a, 1.0), (b, -1.0)])
    assert expectation(S2, singlet) == pytest.approx(0.0)
    assert len(singlet.apply(S2)) == 0
    assert expectation(S2, triplet) == pytest.approx(2.0)


def test_spin_ops_rejects_empty():
    with pytest.raises(ValueError):
        spin_ops(0)
