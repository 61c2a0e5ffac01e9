from slater_ops.fermion.fermion_ops import annihilate, create, is_occupied, phase_for


def test_emptying_then_refilling_is_sign_neutral():
    bits = 0b10110
    for mode in (1, 2, 4):
        sign_out, emptied = annihilate(bits, mode)
        sign_in, refilled = create(emptied, mode)
        assert refilled == bits
        assert sign_out * sign_in == 1


def test_forbidden_transitions_return_none():
    assert annihilate(0, 1) is None
    assert annihilate(0b101, 1) is None
    assert create(0b010, 1) is None
    assert create(1 << 63, 63) is None


def test_phase_counts_occupied_modes_below_site():
    bits = 0b1011
    assert phase_for(0, bits) == 1   # nothing below mode 0
    assert phase_for(1, bits) == -1  # mode 0
    assert phase_for(2, bits) == 1   # modes 0, 1
    assert phase_for(3, bits) == 1
    assert phase_for(4, bits) == -1  # modes 0, 1, 3


def test_is_occupied_high_mode():
    bits = 1 << 63
    assert is_occupied(bits, 63)
    assert not is_occupied(bits, 62)
    assert annihilate(bits, 63) == (1, 0)
