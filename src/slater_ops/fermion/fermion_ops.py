"""
Bit-level ladder kernels shared by ``Determinant`` and the apply engine.

Occupations are plain ints: bit ``j`` set means spin orbital ``j`` is filled.
Every kernel returns ``None`` for a forbidden transition instead of raising,
and otherwise a ``(sign, bits)`` pair where the sign counts how many filled
orbitals the ladder operator has to hop over to reach its slot.
"""
import logging

logger = logging.getLogger(__name__)

MAX_MODES = 64


def is_occupied(bits: int, mode: int) -> bool:
    return bool((bits >> mode) & 1)


def phase_for(mode: int, bits: int) -> int:
    """Sign from the filled orbitals strictly below ``mode``."""
    below = bits & ((1 << mode) - 1)  # empty for mode 0
    return 1 - 2 * (below.bit_count() & 1)


def annihilate(bits: int, mode: int):
    """
    Empty ``mode``.

    Returns
    -------
    (sign, bits) or ``None``
        ``None`` when ``mode`` holds no particle.
    """
    if not is_occupied(bits, mode):
        logger.debug("a_%d on %d: mode empty", mode, bits)
        return None
    sign = phase_for(mode, bits)
    logger.debug("a_%d on %d: phase %+d", mode, bits, sign)
    return sign, bits ^ (1 << mode)


def create(bits: int, mode: int):
    """
    Fill ``mode``.

    Returns
    -------
    (sign, bits) or ``None``
        ``None`` when ``mode`` is already filled (Pauli exclusion).
    """
    if is_occupied(bits, mode):
        logger.debug("a_%d^dag on %d: Pauli blocked", mode, bits)
        return None
    sign = phase_for(mode, bits)
    logger.debug("a_%d^dag on %d: phase %+d", mode, bits, sign)
    return sign, bits | (1 << mode)
