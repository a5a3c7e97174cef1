#!/usr/bin/env python3
"""
01_basic_pool.py - Simplest possible pool

Demonstrates: submitting jobs to a preset pool and waiting for them
"""
import threading
import time

from jobpool import small_pool


def main() -> None:
    """Square some numbers on ten worker threads."""
    results: dict[int, int] = {}
    lock = threading.Lock()

    def square(n: int) -> None:
        time.sleep(0.01)
        with lock:
            results[n] = n * n

    with small_pool() as pool:
        for n in range(50):
            pool.submit(lambda n=n: square(n))
        pool.wait_until_done()
        print(f"All {len(results)} jobs finished; 7 squared is {results[7]}")


if __name__ == "__main__":
    main()
