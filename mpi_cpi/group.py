import threading
import time
from collections import namedtuple

from mpi4py import MPI

from .exceptions import GroupError, CollectiveError


class GroupContext(namedtuple('GroupContext', ['rank', 'size'])):
    """Ordinal of this worker and the number of workers in the run."""
    __slots__ = ()

    def __new__(cls, rank, size):
        if size < 1:
            raise GroupError('group size must be at least 1, got %d' % size)
        if not 0 <= rank < size:
            raise GroupError('rank %d outside group of size %d' % (rank, size))
        return super(GroupContext, cls).__new__(cls, rank, size)

    @classmethod
    def of(cls, group):
        return cls(group.rank, group.size)


class MPIGroup():
    """Worker group backed by an mpi4py communicator."""
    def __init__(self, comm=None):
        if comm is None:
            comm = MPI.COMM_WORLD
        self.comm = comm
        try:
            self.rank = comm.Get_rank()
            self.size = comm.Get_size()
        except MPI.Exception as e:
            raise GroupError('cannot query communicator: %s' % e) from e

    def barrier(self):
        try:
            self.comm.Barrier()
        except MPI.Exception as e:
            raise CollectiveError('barrier failed on rank %d: %s' % (self.rank, e)) from e

    def reduce(self, value, root=0):
        try:
            return self.comm.reduce(value, op=MPI.SUM, root=root)
        except MPI.Exception as e:
            raise CollectiveError('reduce failed on rank %d: %s' % (self.rank, e)) from e

    def wtime(self):
        return MPI.Wtime()

    def abort(self, code=1):
        self.comm.Abort(code)


class ThreadTeam():
    """A fixed team of in-process workers that share one barrier.

    Every member runs the same function; the team hands out one
    ThreadGroup per rank.
    """
    def __init__(self, size):
        if size < 1:
            raise GroupError('team size must be at least 1, got %d' % size)
        self.size = size
        self._barrier = threading.Barrier(size)
        self._slots = [None]*size

    def member(self, rank):
        return ThreadGroup(self, rank)

    def run(self, target, *args):
        results = [None]*self.size
        failures = []
        lock = threading.Lock()

        def worker(rank):
            try:
                results[rank] = target(self.member(rank), *args)
            except BaseException as e:
                with lock:
                    failures.append(e)
                # peers still waiting on the barrier must not hang
                self._barrier.abort()

        threads = [threading.Thread(target=worker, args=(rank,), name='worker-%d' % rank)
                   for rank in range(self.size)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        if failures:
            raise failures[0]
        return results


class ThreadGroup():
    def __init__(self, team, rank):
        self.team = team
        self.rank = rank
        self.size = team.size

    def barrier(self):
        try:
            self.team._barrier.wait()
        except threading.BrokenBarrierError as e:
            raise CollectiveError('barrier broken on rank %d' % self.rank) from e

    def reduce(self, value, root=0):
        if not 0 <= root < self.size:
            raise CollectiveError('root %d outside group of size %d' % (root, self.size))
        self.team._slots[self.rank] = value
        self.barrier()
        total = None
        if self.rank == root:
            total = 0.0
            for v in self.team._slots:
                total += v
        # slots may be reused by the next reduce only after the root has read them
        self.barrier()
        return total

    def wtime(self):
        return time.perf_counter()

    def abort(self, code=1):
        self.team._barrier.abort()
        raise SystemExit(code)
