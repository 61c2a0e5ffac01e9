import numpy as np
import pytest

from slater_ops import (
    Annihilate,
    Create,
    Operator,
    State,
    Term,
    excitation_operator,
    number_operator,
)
from slater_ops.fermion import n_modes_of


@pytest.mark.parametrize("position", [-1, 64, True, 1.0])
def test_bad_position(position):
    with pytest.raises(ValueError):
        Create(position)
    with pytest.raises(ValueError):
        Annihilate(position)


def test_term_coerces():
    term = Term(1, [Create(1), Annihilate(0)])
    assert term.weight == 1.0 and isinstance(term.weight, float)
    assert term.ops == (Create(1), Annihilate(0))


def test_term_rejects_bad_factor():
    with pytest.raises(TypeError):
        Term(1.0, [Create(1), 3])
    with pytest.raises(TypeError):
        Term(1j, [Create(1)])


def test_operator_from_pairs():
    op = Operator([(1.0, [Create(1), Annihilate(1)])])
    assert op == number_operator(1)
    assert op == Operator([Term(1.0, (Create(1), Annihilate(1)))])
    assert len(op) == 1


def test_sum_and_scale():
    op = number_operator(0) + 2.0 * excitation_operator(1, 0)
    assert len(op) == 2
    assert [t.weight for t in op] == [1.0, 2.0]
    assert [t.weight for t in op * 3] == [3.0, 6.0]
    assert [t.weight for t in -op] == [-1.0, -2.0]


def test_difference_cancels_on_apply():
    op = excitation_operator(0, 1) - excitation_operator(0, 1)
    assert len(op) == 2
    assert len(State([(2, 1.0)]).apply(op)) == 0


def test_product_concatenates_left_first():
    prod = number_operator(0, 2.0) * excitation_operator(1, 2, 0.5)
    (term,) = prod.terms
    assert term.weight == 1.0
    assert term.ops == (Create(0), Annihilate(0), Create(1), Annihilate(2))


def test_product_distributes():
    a = number_operator(0) + number_operator(1)
    b = number_operator(2) + number_operator(3) + Operator.identity()
    assert len(a * b) == 6


def test_adjoint():
    assert excitation_operator(1, 2).adjoint() == excitation_operator(2, 1)
    term = Term(0.5, (Create(1), Create(2), Annihilate(3)))
    assert term.adjoint().ops == (Create(3), Annihilate(2), Annihilate(1))
    assert number_operator(4).adjoint() == number_operator(4)


def test_identity():
    (term,) = Operator.identity(2.5).terms
    assert term.weight == 2.5
    assert term.ops == ()


def test_n_modes_of():
    assert n_modes_of(Operator()) == 0
    assert n_modes_of(Operator.identity()) == 0
    assert n_modes_of(number_operator(0) + excitation_operator(5, 2)) == 6


def test_str():
    assert str(number_operator(1)) == "+1 a1^ a1"
    assert str(Operator()) == "0"


def test_numpy_integer_positions():
    assert Create(np.int64(3)) == Create(3)
    assert type(Annihilate(np.uint8(2)).position) is int
    assert hash(Create(np.int32(5))) == hash(Create(5))
