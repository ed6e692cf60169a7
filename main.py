import argparse
import logging
import sys

from bits import TYPE_SIZES, bit_size
from delivery_system import FoodDeliverySystem

DEFAULT_FARMS = [0, 1, 2, 4, 6, 8, 12, 18, 19, 20, 21, 22, 406, 407, 408, 409, 410, 444, 445]
DEFAULT_POSITION = 10
DEFAULT_COUNT = 10
DEFAULT_TYPE = 'u64'


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Find the farms closest to a customer by XOR distance, '
                    'then guess the customer position back from them',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Default farms, customer at 10, 10 closest farms:
    %(prog)s

  8-bit farms:
    %(prog)s --type u8 --farms 0 1 2 3 4 5 6 7 8 9 10 12 20 --position 18 --count 8
        """
    )
    parser.add_argument('-f', '--farms', type=int, nargs='+', default=DEFAULT_FARMS,
                        help='farm positions (default: %(default)s)')
    parser.add_argument('-p', '--position', type=int, default=DEFAULT_POSITION,
                        help='customer position (default: %(default)s)')
    parser.add_argument('-c', '--count', type=int, default=DEFAULT_COUNT,
                        help='number of closest farms (default: %(default)s)')
    parser.add_argument('-t', '--type', dest='type_name', choices=sorted(TYPE_SIZES), default=DEFAULT_TYPE,
                        help='unsigned integer type of positions (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log how the position guess is resolved')
    args = parser.parse_args(argv)

    limit = 1 << bit_size(args.type_name)
    for value in args.farms + [args.position]:
        if not 0 <= value < limit:
            parser.error('{} does not fit in {}'.format(value, args.type_name))
    if args.count < 0:
        parser.error('count must not be negative')
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s %(levelname)s: %(message)s'
    )

    delivery_system = FoodDeliverySystem(args.farms, bit_size(args.type_name))
    closest_farms = delivery_system.closest_farms(args.position, args.count)
    position_guess = delivery_system.reverse_closest_farms(closest_farms)

    print('Farms list: {}'.format(args.farms))
    print('Closest {} farms to customer\'s position {} are: {}'.format(
        args.count, args.position, closest_farms
    ))
    if position_guess is None:
        print('No position of the customer produces these closest farms')
        return 1

    closest_farms_to_guess = delivery_system.closest_farms(position_guess, args.count)
    print('Reversed guess of customer\'s possible position is: {}'.format(position_guess))
    print('Closest {} farms to reversed guess of customer\'s possible position {} are: {}'.format(
        args.count, position_guess, closest_farms_to_guess
    ))
    if closest_farms_to_guess != closest_farms:
        print('Reversed guess does not reproduce the closest farms')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
