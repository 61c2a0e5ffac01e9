"""
Slater determinants as immutable occupation bitmasks.
"""
from __future__ import annotations

from dataclasses import dataclass
from operator import index as _as_index
from typing import Iterable, Optional, Tuple

from .fermion_ops import MAX_MODES, annihilate, create, is_occupied
from .operator import Annihilate, Create


class DeterminantError(ValueError):
    """Raised when a determinant cannot be built from the supplied occupations."""


def _integer_or_raise(value, what: str) -> int:
    # numpy integers are accepted, bools and floats are not
    if isinstance(value, bool):
        raise DeterminantError(f"{what} must be an integer, got {value!r}")
    try:
        return _as_index(value)
    except TypeError:
        raise DeterminantError(f"{what} must be an integer, got {value!r}") from None


@dataclass(frozen=True, order=True)
class Determinant:
    """
    A single Slater determinant over at most ``MAX_MODES`` spin orbitals.

    Bit ``j`` of ``index`` is set when spin orbital ``j`` is occupied. Two
    determinants compare and hash equal iff their bit patterns do, so they can
    be used directly as dictionary keys.

    Parameters
    ----------
    index : int
        Raw occupation bit pattern, ``0 <= index < 2**MAX_MODES``.

    Examples
    --------
    >>> Determinant.from_occupied([0, 1, 2]).index
    7
    >>> Determinant(5).occupied_indices()
    (0, 2)
    """

    index: int = 0

    def __post_init__(self):
        index = _integer_or_raise(self.index, "Determinant index")
        object.__setattr__(self, "index", index)
        if not 0 <= index < (1 << MAX_MODES):
            raise DeterminantError(
                f"Determinant index {self.index} does not fit in {MAX_MODES} modes"
            )

    @classmethod
    def from_index(cls, index: int) -> Determinant:
        return cls(index)

    @classmethod
    def from_occupied(cls, occupied: Iterable[int]) -> Determinant:
        """
        Build a determinant from an explicit list of occupied spin orbitals.

        Parameters
        ----------
        occupied : iterable of int
            Occupied mode indices, in any order.

        Raises
        ------
        DeterminantError
            If an index is repeated, is not an integer, or lies outside
            ``[0, MAX_MODES)``.
        """
        index = 0
        for j in occupied:
            j = _integer_or_raise(j, "Occupied index")
            if not 0 <= j < MAX_MODES:
                raise DeterminantError(
                    f"Occupied index {j} outside the range [0, {MAX_MODES})"
                )
            if index & (1 << j):
                raise DeterminantError(f"State array contains repeated index {j}")
            index |= 1 << j
        return cls(index)

    @property
    def n_particles(self) -> int:
        return self.index.bit_count()

    def occupied(self, j: int) -> bool:
        return is_occupied(self.index, j)

    def occupied_indices(self) -> Tuple[int, ...]:
        return tuple(j for j in range(self.index.bit_length()) if self.occupied(j))

    def create(self, j: int) -> Optional[Determinant]:
        """Return this determinant with mode ``j`` filled, or ``None`` if already filled."""
        res = create(self.index, j)
        return None if res is None else Determinant(res[1])

    def annihilate(self, j: int) -> Optional[Determinant]:
        """Return this determinant with mode ``j`` emptied, or ``None`` if already empty."""
        res = annihilate(self.index, j)
        return None if res is None else Determinant(res[1])

    def apply(self, op) -> Optional[Tuple[int, Determinant]]:
        """
        Apply one elementary ladder operator.

        Both variants take the sign (-1)^n where n counts the occupied modes
        strictly below the acted-on position.

        Parameters
        ----------
        op : Create or Annihilate

        Returns
        -------
        (sign, Determinant) or ``None``
            ``None`` when the transition is forbidden (creating into an
            occupied mode or annihilating an empty one).
        """
        if isinstance(op, Create):
            res = create(self.index, op.position)
        elif isinstance(op, Annihilate):
            res = annihilate(self.index, op.position)
        else:
            raise TypeError(f"Expected Create or Annihilate, got {type(op).__name__}")
        if res is None:
            return None
        phase, new_index = res
        return phase, Determinant(new_index)

    def to_bitstring(self, n_modes: int = 8) -> str:
        """Binary occupation string, mode 0 rightmost."""
        return f"{self.index:0{n_modes}b}"

    def __repr__(self):
        return f"Determinant({self.index:#b})"
