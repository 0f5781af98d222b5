import time
import numpy as np
from numba import jit

# --- CONFIGURATION ---
MAX_ITER = 256

# |z|^2 threshold, i.e. an escape radius of 2
ESCAPE_NORM_SQR = 4.0

# demo points: a sweep along the real axis plus a point near the boundary
CENTER_REAL = -0.7436438870371587
CENTER_IMAG = 0.13182590420531197
SWEEP_START = -2.5
SWEEP_END = 1.0
SAMPLES = 20

# --- KERNEL (Numba Accelerated) ---
# No fastmath here: escape counts must be reproducible bit for bit.
@jit(nopython=True)
def mandelbrot_kernel(c, max_iter):
    """
    Iterates z = z*z + c from z = 0.
    Returns the first iteration index where |z|^2 > 4, or max_iter if the
    point never escaped.
    """
    z = 0j
    for n in range(max_iter):
        if z.real*z.real + z.imag*z.imag > ESCAPE_NORM_SQR:
            return n
        z = z*z + c
    return max_iter

def escape_time(c, limit):
    """
    Try to determine if `c` is in the Mandelbrot set, using at most `limit`
    iterations to decide.

    If `c` is not a member, returns the number of iterations it took for `c`
    to leave the circle of radius two centered on the origin. If `c` seems to
    be a member (the limit was reached without proving otherwise), returns None.
    """
    if isinstance(limit, bool) or not isinstance(limit, (int, np.integer)):
        raise TypeError(f"limit must be an integer, got {limit!r}")
    limit = max(int(limit), 0)
    n = mandelbrot_kernel(complex(c), limit)
    if n >= limit:
        return None
    return int(n)

def main():
    print(f"Starting escape-time sweep: {SAMPLES} points, limit {MAX_ITER}.")

    # Numba compiles on the first call, keep that out of the timings.
    print("Compiling JIT functions (Warmup)...")
    _ = escape_time(0j, 1)
    print("Compilation Complete.")
    print("-" * 40)

    points = [complex(r, 0.0) for r in np.linspace(SWEEP_START, SWEEP_END, SAMPLES)]
    points.append(complex(CENTER_REAL, CENTER_IMAG))

    total_time = 0
    for i, c in enumerate(points):
        start_time = time.time()
        result = escape_time(c, MAX_ITER)
        duration = time.time() - start_time
        total_time += duration

        label = "likely in set" if result is None else f"escaped at {result}"
        print(f"Point {i+1}/{len(points)} | c = {c.real:+.6f}{c.imag:+.6f}i | {label} | Time: {duration:.6f}s")

    print("-" * 40)
    print(f"Total Evaluation Time: {total_time:.6f}s")

if __name__ == "__main__":
    main()
