from collections import namedtuple

from .exceptions import ConfigurationError, GroupError

Partition = namedtuple('Partition', ['start', 'count'])


def partition(n, rank, size):
    """Contiguous block of steps owned by `rank`.

    The n % size leftover steps go one each to the lowest ranks, so counts
    differ by at most one and ranks past n get an empty block.
    """
    if n < 1:
        raise ConfigurationError('number of steps must be positive, got %d' % n)
    if size < 1 or not 0 <= rank < size:
        raise GroupError('rank %d outside group of size %d' % (rank, size))
    base = n//size
    rem = n%size
    start = rank*base + min(rank, rem)
    count = base + (1 if rank < rem else 0)
    return Partition(start, count)


def partition_all(n, size):
    return [partition(n, rank, size) for rank in range(size)]
