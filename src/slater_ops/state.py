"""
Sparse many-fermion states and the operator-application engine.

A ``State`` is a superposition of Slater determinants stored as a dictionary
``Determinant -> amplitude``. Amplitudes whose magnitude is at or below
``AMPLITUDE_TOL`` are treated as exact zeros and never stored.

Applying an ``Operator`` threads every term through every determinant of the
state independently and sums all contributions into a new, pruned ``State``.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Tuple, Union

import numpy as np
from line_profiler import profile

from .fermion.determinant import Determinant, DeterminantError
from .fermion.operator import Operator, Term

logger = logging.getLogger(__name__)

AMPLITUDE_TOL = float(np.finfo(np.float64).eps)

DeterminantLike = Union[Determinant, int]


def _as_determinant(key: DeterminantLike) -> Determinant:
    return key if isinstance(key, Determinant) else Determinant(key)


def _prune(amplitudes: Dict[Determinant, float], tol: float) -> Dict[Determinant, float]:
    return {d: v for d, v in amplitudes.items() if abs(v) > tol}


class State:
    """
    Sparse superposition of Slater determinants with real amplitudes.

    Parameters
    ----------
    pairs : iterable of (Determinant or int, float), or a mapping
        Determinant/amplitude pairs. Raw ints are wrapped as
        ``Determinant(index)``. Later duplicates overwrite earlier ones.
    tol : float, optional
        Amplitudes with ``abs(amp) <= tol`` are dropped. Defaults to
        ``AMPLITUDE_TOL``.

    Examples
    --------
    >>> s = State([(7, 0.33), (2, 0.33), (14, 0.33)])
    >>> s[Determinant(7)]
    0.33
    """

    __slots__ = ("_amplitudes",)

    def __init__(self, pairs: Union[Iterable[Tuple[DeterminantLike, float]], Mapping] = (),
                 tol: float = AMPLITUDE_TOL):
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        amplitudes = {}
        for key, amp in pairs:
            amplitudes[_as_determinant(key)] = float(amp)
        self._amplitudes = _prune(amplitudes, tol)

    @classmethod
    def _from_dict(cls, amplitudes: Dict[Determinant, float]) -> State:
        state = cls.__new__(cls)
        state._amplitudes = amplitudes
        return state

    # ----- read-only mapping protocol -----
    def __getitem__(self, key: DeterminantLike) -> float:
        return self._amplitudes[_as_determinant(key)]

    def get(self, key: DeterminantLike, default: float = 0.0) -> float:
        return self._amplitudes.get(_as_determinant(key), default)

    def __contains__(self, key) -> bool:
        if not isinstance(key, Determinant):
            try:
                key = Determinant(key)
            except DeterminantError:
                return False
        return key in self._amplitudes

    def __len__(self):
        return len(self._amplitudes)

    def __iter__(self) -> Iterator[Determinant]:
        return iter(self._amplitudes)

    def items(self):
        return self._amplitudes.items()

    def as_dict(self) -> Dict[int, float]:
        """Copy of the amplitudes keyed by raw determinant index."""
        return {d.index: v for d, v in self._amplitudes.items()}

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self._amplitudes == other._amplitudes

    __hash__ = None

    def __repr__(self):
        body = ", ".join(f"{d.index}: {v!r}" for d, v in self._amplitudes.items())
        return f"State({{{body}}})"

    # ----- overlaps -----
    def inner(self, other: State) -> float:
        """Real overlap ``<self|other>``."""
        small, large = sorted((self._amplitudes, other._amplitudes), key=len)
        return float(sum(v * large[d] for d, v in small.items() if d in large))

    def norm(self) -> float:
        return float(np.sqrt(self.inner(self)))

    # ----- operator application -----
    def apply(self, operator: Operator, tol: float = AMPLITUDE_TOL) -> State:
        """Return ``operator |self>`` as a new State. See :func:`apply_operator`."""
        return apply_operator(self, operator, tol=tol)

    def __rmatmul__(self, operator):
        if not isinstance(operator, Operator):
            return NotImplemented
        return self.apply(operator)

    # ----- dense views -----
    def to_vector(self, n_modes: int) -> np.ndarray:
        """Dense amplitude vector of length ``2**n_modes`` indexed by determinant index."""
        from .matrix import state_to_vector
        return state_to_vector(self, n_modes)

    @classmethod
    def from_vector(cls, vec, tol: float = 1e-12) -> State:
        from .matrix import state_from_vector
        return state_from_vector(vec, tol=tol)


def thread_term(term: Term, source: Determinant, amplitude: float,
                tol: float = AMPLITUDE_TOL) -> Dict[Determinant, float]:
    """
    Thread one term through one source determinant.

    The elementary operators are applied right to left. After each step the
    frontier is regrouped by resulting determinant and pruned at ``tol``;
    branches that hit a forbidden transition simply drop out.

    Returns
    -------
    dict
        Final frontier scaled by ``term.weight`` (not pruned after scaling).
    """
    frontier = {source: amplitude}
    for op in reversed(term.ops):
        nxt = defaultdict(float)
        for det, amp in frontier.items():
            res = det.apply(op)
            if res is None:
                continue
            sign, new_det = res
            nxt[new_det] += sign * amp
        frontier = _prune(nxt, tol)
        if not frontier:
            logger.debug("term %s: source %s blocked at %r", term, source, op)
            break
    return {d: term.weight * v for d, v in frontier.items()}


@profile
def apply_operator(state: State, operator: Operator, tol: float = AMPLITUDE_TOL) -> State:
    """
    Apply an operator to a state.

    Every (term, source determinant) combination is threaded independently
    with :func:`thread_term`; all contributions are summed into one mapping,
    which is pruned at ``tol`` once at the end. Neither input is modified.

    Parameters
    ----------
    state : State
        Input superposition.
    operator : Operator
        Weighted sum of ladder-operator products.
    tol : float, optional
        Pruning threshold for intermediate frontiers and the result.

    Returns
    -------
    State
        The new superposition ``operator |state>``.
    """
    result = defaultdict(float)
    for term in operator:
        for source, amp in state.items():
            for det, v in thread_term(term, source, amp, tol).items():
                result[det] += v
    out = State._from_dict(_prune(result, tol))
    logger.debug(
        "applied %d terms to %d determinants -> %d determinants",
        len(operator), len(state), len(out),
    )
    return out
