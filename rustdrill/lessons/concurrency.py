"""Threads sharing data: offset sums, a shared job counter and two senders on one channel."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue

_JOB_DELAY = 0.25
_CLOSED = object()


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum, per offset, the values whose remainder modulo workers equals that offset.

    Each offset is summed by its own thread over one shared tuple.
    """
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def total(offset: int) -> int:
        result = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {result}")
        return result

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(total, range(workers)))


@dataclass
class JobStatus:
    """A counter of completed jobs, safe to update from several threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def complete_one(self) -> None:
        """Record one more completed job."""
        with self._lock:
            self.jobs_completed += 1


def run_jobs(count: int = 10) -> JobStatus:
    """Run count jobs on their own threads, each recording its completion."""
    status = JobStatus()

    def job() -> None:
        time.sleep(_JOB_DELAY)
        status.complete_one()

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass(frozen=True)
class Queue:
    """Values to send, split into two halves."""

    length: int = 10
    first_half: tuple[int, ...] = (1, 2, 3, 4, 5)
    second_half: tuple[int, ...] = (6, 7, 8, 9, 10)


def send_tx(queue: Queue, channel: SimpleQueue) -> list[threading.Thread]:
    """Start one thread per half sending its values into channel.

    Each thread puts a closing marker after its last value; the started
    threads are returned.
    """

    def sender(values: tuple[int, ...]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
        channel.put(_CLOSED)

    threads = [
        threading.Thread(target=sender, args=(half,))
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue) -> list[int]:
    """Send both halves of queue over one channel and collect every value received."""
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel)
    open_senders = len(senders)
    received: list[int] = []
    while open_senders:
        item = channel.get()
        if item is _CLOSED:
            open_senders -= 1
            continue
        print(f"Got: {item}")
        received.append(item)
    for thread in senders:
        thread.join()
    print(f"total numbers received: {len(received)}")
    return received