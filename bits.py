import enum

import bitops

TYPE_SIZES = {
    'u8': 8,
    'u16': 16,
    'u32': 32,
    'u64': 64,
    'u128': 128,
}


class ContradictionError(Exception):
    pass


class WidthTooSmallError(Exception):
    pass


class Bit(enum.Enum):
    UNSET = None
    ZERO = 0
    ONE = 1

    @classmethod
    def of(cls, val):
        return cls.ONE if val else cls.ZERO

    def __str__(self):
        return '?' if self is Bit.UNSET else str(self.value)


def bit_size(type_name):
    """Number of bits of an unsigned integer type such as 'u64'."""
    try:
        return TYPE_SIZES[type_name]
    except KeyError:
        raise ValueError('unknown integer type {!r}, expected one of: {}'.format(
            type_name, ', '.join(TYPE_SIZES)
        )) from None


class Bits:
    """Partial assignment of the bits of a `size`-bit unsigned integer.

    Slot `i` holds the bit of weight ``2 ** i``. Slots start out
    `Bit.UNSET`; `set_constrained` never flips a decided slot, so the
    register is contradiction-free at every point.
    """

    def __init__(self, size):
        assert size > 0
        self.size = size
        self._bits = [Bit.UNSET] * size

    @classmethod
    def for_type(cls, type_name):
        return cls(bit_size(type_name))

    def _check_index(self, index):
        if not 0 <= index < self.size:
            raise IndexError('bit index {} out of range for {} bits'.format(index, self.size))

    def get(self, index):
        self._check_index(index)
        return self._bits[index]

    def set(self, index, val):
        self._check_index(index)
        self._bits[index] = Bit.of(val)

    def set_constrained(self, index, val):
        self._check_index(index)
        bit = Bit.of(val)
        current = self._bits[index]
        if current is Bit.UNSET:
            self._bits[index] = bit
        elif current is not bit:
            raise ContradictionError('bit {} is already decided as {}, cannot become {}'.format(
                index, current, bit
            ))

    def is_decided(self, index):
        return self.get(index) is not Bit.UNSET

    def materialize(self, width=None):
        if width is None:
            width = self.size
        if width < self.size:
            raise WidthTooSmallError('{} bits cannot hold a {}-bit number'.format(width, self.size))

        number = 0
        for index, bit in enumerate(self._bits):
            # zero bits are already there
            if bit is Bit.ONE:
                number = bitops.set_bit(number, index)
        return number

    def __len__(self):
        return self.size

    def __iter__(self):
        return iter(self._bits)

    def __str__(self):
        return 'Bits<{}>'.format(''.join(str(bit) for bit in reversed(self._bits)))
