#!/usr/bin/env python3
"""
02_cancellable_wait.py - Waiting with a deadline

Demonstrates:
- CancellationToken.with_timeout for a bounded wait
- Jobs keep running after the waiter gives up
- Job events and error handling for a failing job
"""
import time

from jobpool import CancellationToken, EventEmitter, JobPool, WaitTimeoutError
from jobpool.events import JobFailedEvent


def on_failed(event: JobFailedEvent) -> None:
    print(f"job {event.job_id} failed on {event.worker_name}: {event.error.exc_type}")


def flaky() -> None:
    raise RuntimeError("flaky job")


def main() -> None:
    emitter = EventEmitter()
    emitter.on("job.failed", on_failed)

    pool = JobPool(worker_count=2, queue_size=4, name="example", emitter=emitter)
    for _ in range(4):
        pool.submit(lambda: time.sleep(0.5))
    pool.submit(flaky)

    try:
        pool.wait_until_done(CancellationToken.with_timeout(0.1))
    except WaitTimeoutError as exc:
        print(f"Stopped waiting ({exc.reason}); {pool.outstanding} jobs still outstanding")

    pool.close()
    pool.wait_until_done()
    pool.join()
    print("Pool drained and workers stopped")


if __name__ == "__main__":
    main()
