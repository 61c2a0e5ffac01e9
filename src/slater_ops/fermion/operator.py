"""
Second-quantized operators as weighted sums of ladder-operator products.

An ``Operator`` is a sum of ``Term``s. Each term is a real weight times an
ordered product of elementary ``Create``/``Annihilate`` operators, written
left to right as in the physics notation, so that

    Operator([(0.5, [Create(2), Annihilate(0)])])

is ``0.5 a_2† a_0``. When applied to a state the rightmost operator acts
first.
"""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from operator import index as _as_index
from typing import Iterable, Tuple, Union

from .fermion_ops import MAX_MODES


def _check_position(position) -> int:
    if isinstance(position, bool):
        raise ValueError(f"Mode index must be an integer, got {position!r}")
    try:
        position = _as_index(position)
    except TypeError:
        raise ValueError(f"Mode index must be an integer, got {position!r}") from None
    if not 0 <= position < MAX_MODES:
        raise ValueError(f"Mode index {position} outside the range [0, {MAX_MODES})")
    return position


@dataclass(frozen=True)
class Create:
    """Creation operator ``a_position†``."""

    position: int

    def __post_init__(self):
        object.__setattr__(self, "position", _check_position(self.position))

    def adjoint(self) -> Annihilate:
        return Annihilate(self.position)

    def __repr__(self):
        return f"Create({self.position})"


@dataclass(frozen=True)
class Annihilate:
    """Annihilation operator ``a_position``."""

    position: int

    def __post_init__(self):
        object.__setattr__(self, "position", _check_position(self.position))

    def adjoint(self) -> Create:
        return Create(self.position)

    def __repr__(self):
        return f"Annihilate({self.position})"


Elementary = Union[Create, Annihilate]


@dataclass(frozen=True)
class Term:
    """
    A weighted product of elementary operators.

    Parameters
    ----------
    weight : float
        Real coefficient of the product.
    ops : sequence of Create/Annihilate
        Factors in written (left-to-right) order. An empty sequence is the
        identity.
    """

    weight: float
    ops: Tuple[Elementary, ...] = ()

    def __post_init__(self):
        if not isinstance(self.weight, Real):
            raise TypeError(f"Term weight must be real, got {self.weight!r}")
        ops = tuple(self.ops)
        for op in ops:
            if not isinstance(op, (Create, Annihilate)):
                raise TypeError(f"Expected Create or Annihilate, got {type(op).__name__}")
        object.__setattr__(self, "weight", float(self.weight))
        object.__setattr__(self, "ops", ops)

    def adjoint(self) -> Term:
        return Term(self.weight, tuple(op.adjoint() for op in reversed(self.ops)))

    def __str__(self):
        factors = " ".join(
            f"a{op.position}^" if isinstance(op, Create) else f"a{op.position}"
            for op in self.ops
        )
        return f"{self.weight:+g} {factors}".rstrip()


class Operator:
    """
    A sum of weighted ladder-operator products.

    Parameters
    ----------
    terms : iterable of Term or (weight, sequence) pairs

    Notes
    -----
    Operators are immutable; every arithmetic operation returns a new one.
    ``+`` and ``-`` concatenate term lists, ``*`` scales by a real number or
    multiplies two operators term by term (left factor written first), and
    ``adjoint`` returns the Hermitian conjugate.

    Examples
    --------
    >>> n1 = Operator([(1.0, [Create(1), Annihilate(1)])])
    >>> hop = excitation_operator(0, 1) + excitation_operator(1, 0)
    """

    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable = ()):
        built = []
        for term in terms:
            if not isinstance(term, Term):
                weight, ops = term
                term = Term(weight, tuple(ops))
            built.append(term)
        self._terms = tuple(built)

    @classmethod
    def identity(cls, weight: float = 1.0) -> Operator:
        return cls([Term(weight, ())])

    @property
    def terms(self) -> Tuple[Term, ...]:
        return self._terms

    def __len__(self):
        return len(self._terms)

    def __iter__(self):
        return iter(self._terms)

    def __add__(self, other):
        if not isinstance(other, Operator):
            return NotImplemented
        return Operator(self._terms + other._terms)

    def __neg__(self):
        return -1.0 * self

    def __sub__(self, other):
        if not isinstance(other, Operator):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other):
        if isinstance(other, Real):
            return Operator(Term(other * t.weight, t.ops) for t in self._terms)
        if isinstance(other, Operator):
            return Operator(
                Term(a.weight * b.weight, a.ops + b.ops)
                for a in self._terms
                for b in other._terms
            )
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def adjoint(self) -> Operator:
        return Operator(t.adjoint() for t in self._terms)

    def __eq__(self, other):
        if not isinstance(other, Operator):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None

    def __repr__(self):
        return f"Operator({list(self._terms)!r})"

    def __str__(self):
        return " ".join(str(t) for t in self._terms) or "0"


def number_operator(j: int, weight: float = 1.0) -> Operator:
    """``weight * a_j† a_j``."""
    return Operator([Term(weight, (Create(j), Annihilate(j)))])


def excitation_operator(p: int, q: int, weight: float = 1.0) -> Operator:
    """``weight * a_p† a_q``."""
    return Operator([Term(weight, (Create(p), Annihilate(q)))])


def n_modes_of(op: Operator) -> int:
    """Number of modes needed to represent ``op`` (highest position + 1)."""
    return max((e.position + 1 for t in op for e in t.ops), default=0)
