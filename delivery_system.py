from xor_distance import DEFAULT_KEY_LENGTH, XorDistance


class FoodDeliverySystem:
    """Farms are points, a customer's position is the key looked up."""

    def __init__(self, farms, key_length=DEFAULT_KEY_LENGTH):
        self.xor_distance = XorDistance(farms, key_length)

    @property
    def farms(self):
        return self.xor_distance.points

    def closest_farms(self, position, count):
        return self.xor_distance.closest(position, count)

    def reverse_closest_farms(self, closest_farms):
        return self.xor_distance.reverse_closest(closest_farms)
