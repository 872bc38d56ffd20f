import argparse
import sys

from mpi4py import MPI

from .exceptions import ConfigurationError
from .group import MPIGroup
from .collective import compute_pi

DEFAULT_STEPS = 1000000


def mpi_excepthook(type, value, traceback):
    sys.__excepthook__(type, value, traceback)
    # one rank dying would leave the others stuck in a collective
    if MPI.COMM_WORLD.Get_size() > 1:
        MPI.COMM_WORLD.Abort(1)


def build_parser():
    parser = argparse.ArgumentParser(prog='mpi-cpi',
                                     description='compute pi with the midpoint rule across MPI ranks')
    parser.add_argument('steps', type=int, nargs='?', default=DEFAULT_STEPS,
                        help='number of integration steps (default: %d)' % DEFAULT_STEPS)
    parser.add_argument('--root', type=int, default=0,
                        help='rank that receives and prints the result (default: 0)')
    parser.add_argument('--debug', action='store_true',
                        help='print the partition and local sum of every rank')
    return parser


def check_steps(steps):
    if steps <= 0:
        raise ConfigurationError('number of steps must be positive.')
    return steps


def main(argv=None, group=None):
    args = build_parser().parse_args(argv)
    if group is None:
        sys.excepthook = mpi_excepthook
        group = MPIGroup()

    try:
        n = check_steps(args.steps)
    except ConfigurationError as e:
        if group.rank == args.root:
            print('Error: %s' % e, file=sys.stderr)
        group.abort(1)
        return 1

    if args.debug and group.rank == args.root:
        print('use rank number:%d,steps:%d' % (group.size, n))
    result = compute_pi(group, n, root=args.root, debug=args.debug)
    if result is not None:
        print('PI is %.15f' % result.pi)
        print('Elapsed time = %.0f nanoseconds' % (result.elapsed*1e9))
    return 0
