import logging

from bitops import distance, highest_bit, is_bit_set
from bits import Bits, ContradictionError

DEFAULT_KEY_LENGTH = 64

logger = logging.getLogger(__name__)


class XorDistance:
    """Exact nearest points under the XOR metric, and the way back.

    `closest` ranks the whole point set by ``point ^ key``.
    `reverse_closest` takes such a ranking and finds a key that produces it,
    the smallest one that does, or returns None when no key can.
    """

    def __init__(self, points, key_length=DEFAULT_KEY_LENGTH):
        assert key_length > 0
        self.key_length = key_length
        self.points = tuple(points)
        for point in self.points:
            self._check_key(point)

    def _check_key(self, key):
        assert 0 <= key < (1 << self.key_length)

    def closest(self, key, count):
        self._check_key(key)
        assert count >= 0
        # sorted() is stable: equal distances keep point set order
        return sorted(self.points, key=lambda point: distance(point, key))[:count]

    def reverse_closest(self, closest_points):
        closest_points = list(closest_points)
        for point in closest_points:
            self._check_key(point)

        inequalities = self.form_inequalities(closest_points)
        bit_rep = self.form_bits_restrictions(inequalities)
        if bit_rep is None:
            return None
        logger.debug('resolved %d inequalities into %s', len(inequalities), bit_rep)
        return bit_rep.materialize(self.key_length)

    def form_inequalities(self, closest_points):
        """Pairs (a, b) that must all satisfy ``a ^ key < b ^ key``."""
        return (self._compose_closest_points_inequalities(closest_points) +
                self._compose_further_points_inequalities(closest_points))

    def _compose_closest_points_inequalities(self, closest_points):
        return [(closest_points[i], closest_points[i + 1]) for i in range(len(closest_points) - 1)]

    def _compose_further_points_inequalities(self, closest_points):
        if not closest_points:
            return []
        # every point left out must be further than the last one kept
        last = closest_points[-1]
        return [(last, point) for point in self._get_further_points(closest_points)]

    def _get_further_points(self, closest_points):
        excluded = set(closest_points)
        return [point for point in self.points if point not in excluded]

    def form_bits_restrictions(self, inequalities):
        bit_rep = Bits(self.key_length)
        for a, b in inequalities:
            try:
                self._add_bit_restriction(a, b, bit_rep)
            except ContradictionError as e:
                logger.debug('no key satisfies %d < %d: %s', a, b, e)
                return None
        return bit_rep

    def _add_bit_restriction(self, a, b, bit_rep):
        d = distance(a, b)
        if d == 0:
            raise ContradictionError('{} cannot be strictly closer than itself'.format(a))
        # a and b agree above this bit, so only the key's bit here decides
        # which one is closer: it has to match a
        index = highest_bit(d)
        bit_rep.set_constrained(index, is_bit_set(a, index))
