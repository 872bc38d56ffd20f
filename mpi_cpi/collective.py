from collections import namedtuple

from .group import GroupContext
from .partition import partition
from .integrate import step_width, local_sum

GlobalResult = namedtuple('GlobalResult', ['global_sum', 'pi', 'elapsed'])


def compute_pi(group, n, root=0, debug=False):
    """Run one integration on every member of `group`.

    All members must call this with the same n and root. The root gets a
    GlobalResult, everyone else gets None. Any failure in the barrier or the
    reduction propagates; no partial sum is ever returned.
    """
    ctx = GroupContext.of(group)
    GroupContext(root, ctx.size)  # root must be a member
    h = step_width(n)
    part = partition(n, ctx.rank, ctx.size)

    # nobody starts the clock while a peer is still initializing
    group.barrier()
    t0 = group.wtime()

    mysum = local_sum(part, h)
    if debug:
        print('rank:%d,start:%d,count:%d,local_sum:%.15e' % (ctx.rank, part.start, part.count, mysum))

    total = group.reduce(mysum, root=root)
    t1 = group.wtime()

    if ctx.rank != root:
        return None
    return GlobalResult(total, total*h, t1 - t0)
