import pytest

from bits import Bit, Bits, ContradictionError, WidthTooSmallError, bit_size


def test_bit_size():
    assert bit_size('u8') == 8
    assert bit_size('u16') == 16
    assert bit_size('u32') == 32
    assert bit_size('u64') == 64
    assert bit_size('u128') == 128


def test_bit_size_unknown_type():
    with pytest.raises(ValueError, match='unknown integer type'):
        bit_size('i64')


def test_new_bits_are_unset():
    bit_rep = Bits.for_type('u64')
    assert len(bit_rep) == 64
    for i in range(64):
        assert bit_rep.get(i) is Bit.UNSET, 'bit {} should be unset'.format(i)
        assert not bit_rep.is_decided(i)


def test_get_set():
    bit_rep = Bits(64)
    bit_rep.set(0, True)
    assert bit_rep.get(0) is Bit.ONE
    bit_rep.set(22, False)
    assert bit_rep.get(22) is Bit.ZERO
    bit_rep.set(63, False)
    assert bit_rep.get(63) is Bit.ZERO
    # plain set overrides a decided bit
    bit_rep.set(63, True)
    assert bit_rep.get(63) is Bit.ONE


@pytest.mark.parametrize('index', [64, 100, -1])
def test_index_out_of_range(index):
    bit_rep = Bits(64)
    with pytest.raises(IndexError):
        bit_rep.get(index)
    with pytest.raises(IndexError):
        bit_rep.set(index, True)
    with pytest.raises(IndexError):
        bit_rep.set_constrained(index, True)
    with pytest.raises(IndexError):
        bit_rep.is_decided(index)


def test_set_constrained():
    bit_rep = Bits(64)
    bit_rep.set_constrained(2, True)
    # same value again is fine
    bit_rep.set_constrained(2, True)
    assert bit_rep.get(2) is Bit.ONE


def test_set_constrained_conflict_keeps_bit():
    bit_rep = Bits(64)
    bit_rep.set(2, True)
    with pytest.raises(ContradictionError):
        bit_rep.set_constrained(2, False)
    assert bit_rep.get(2) is Bit.ONE


def test_set_constrained_conflict_on_zero():
    bit_rep = Bits(8)
    bit_rep.set_constrained(7, False)
    with pytest.raises(ContradictionError, match='bit 7'):
        bit_rep.set_constrained(7, True)
    assert bit_rep.get(7) is Bit.ZERO


def test_is_decided():
    bit_rep = Bits(64)
    assert not bit_rep.is_decided(0)
    bit_rep.set(0, True)
    assert bit_rep.is_decided(0)
    bit_rep.set(0, False)
    assert bit_rep.is_decided(0)


def test_materialize():
    bit_rep = Bits(64)
    bit_rep.set_constrained(1, True)
    bit_rep.set_constrained(2, True)
    bit_rep.set_constrained(6, True)
    bit_rep.set_constrained(5, False)
    assert bit_rep.materialize() == 70
    assert bit_rep.materialize(64) == 70


def test_materialize_empty_is_zero():
    assert Bits(16).materialize() == 0


def test_materialize_top_bit():
    bit_rep = Bits(8)
    bit_rep.set(7, True)
    bit_rep.set(0, True)
    assert bit_rep.materialize() == 0b1000_0001


def test_materialize_wider_target():
    bit_rep = Bits(32)
    bit_rep.set(31, True)
    assert bit_rep.materialize(64) == 1 << 31


def test_materialize_width_too_small():
    bit_rep = Bits.for_type('u64')
    with pytest.raises(WidthTooSmallError):
        bit_rep.materialize(bit_size('u32'))


def test_materialize_is_idempotent():
    bit_rep = Bits(8)
    for i, val in enumerate([1, 0, 1, 1, 0, 0, 1, 0]):
        bit_rep.set(i, val)
    assert bit_rep.materialize() == bit_rep.materialize() == 0b0100_1101


def test_iter_and_str():
    bit_rep = Bits(4)
    bit_rep.set(0, True)
    bit_rep.set(3, False)
    assert list(bit_rep) == [Bit.ONE, Bit.UNSET, Bit.UNSET, Bit.ZERO]
    assert str(bit_rep) == 'Bits<0??1>'
