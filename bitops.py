"""Bit helpers for plain ints. Setters return the new value."""


def distance(x, y):
    return x ^ y


def highest_bit(x):
    if x == 0:
        return -1
    return x.bit_length() - 1


def is_flag(x):
    # exactly one "1" bit: clearing the lowest set bit leaves nothing
    return x > 0 and x & (x - 1) == 0


def is_flag_set(x, flag):
    return x & flag != 0


def set_flag(x, flag):
    return x | flag


def is_bit_set(x, bit_index):
    return is_flag_set(x, 1 << bit_index)


def set_bit(x, bit_index):
    return set_flag(x, 1 << bit_index)
