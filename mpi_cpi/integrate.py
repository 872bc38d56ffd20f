import numpy as np

# steps evaluated per numpy call, keeps memory flat for large partitions
BLOCK = 1 << 16


def step_width(n):
    return 1.0/n


def local_sum(part, h, block=BLOCK):
    """Sum of 4/(1+x^2) at the midpoints of steps [start, start+count).

    The result is not scaled by h; the caller multiplies once after the
    reduction.
    """
    mysum = 0.0
    end = part.start + part.count
    for lo in range(part.start, end, block):
        i = np.arange(lo, min(lo + block, end), dtype=np.float64)
        x = (i + 0.5)*h
        mysum += float(np.sum(4.0/(1.0 + x*x)))
    return mysum


def sequential_sum(n):
    h = step_width(n)
    mysum = 0.0
    for i in range(n):
        x = (i + 0.5)*h
        mysum += 4.0/(1.0 + x*x)
    return mysum
