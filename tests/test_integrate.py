import math

import pytest

from mpi_cpi import Partition, local_sum, sequential_sum, step_width, partition_all


def test_empty_partition_sums_to_zero():
    assert local_sum(Partition(5, 0), step_width(5)) == 0.0


def test_matches_plain_loop():
    n = 10000
    h = step_width(n)
    assert local_sum(Partition(0, n), h) == pytest.approx(sequential_sum(n), rel=1e-12)


def test_block_size_does_not_change_result():
    n = 5000
    h = step_width(n)
    whole = local_sum(Partition(0, n), h)
    assert local_sum(Partition(0, n), h, block=7) == pytest.approx(whole, rel=1e-12)


def test_single_step():
    # midpoint 0.5 -> 4/(1.25)
    assert local_sum(Partition(0, 1), 1.0) == pytest.approx(3.2)


def test_partial_sums_add_up():
    n = 9999
    h = step_width(n)
    parts = [local_sum(p, h) for p in partition_all(n, 7)]
    assert math.fsum(parts) == pytest.approx(sequential_sum(n), rel=1e-12)
