import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, TypeVar

from engine.result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class BatchCancelled(Exception):
    pass


def map_with_concurrency(
    items: list[T],
    concurrency: int,
    worker: Callable[[T, int], R],
    cancel: threading.Event | None = None,
) -> list[Result[R]]:
    """
    Run ``worker(item, index)`` over ``items`` with at most ``concurrency``
    calls in flight.

    Workers claim the next index from a shared cursor and write into their
    own slot, so ``results[i]`` always belongs to ``items[i]``. A failing
    item becomes ``Result.fail`` and never stops its siblings. When
    ``cancel`` is set, items not yet claimed are failed with BatchCancelled.
    """
    results: list[Result[R] | None] = [None] * len(items)
    if not items:
        return []

    lock = threading.Lock()
    cursor = 0

    def claim() -> int | None:
        nonlocal cursor
        with lock:
            if cursor >= len(items):
                return None
            index = cursor
            cursor += 1
            return index

    def run_worker() -> None:
        while True:
            if cancel is not None and cancel.is_set():
                return
            index = claim()
            if index is None:
                return
            try:
                results[index] = Result.ok(worker(items[index], index))
            except Exception as exc:
                logger.debug("item %d (%r) failed: %s", index, items[index], exc)
                results[index] = Result.fail(exc)

    n_workers = max(1, min(concurrency, len(items)))
    with ThreadPoolExecutor(max_workers=n_workers) as executor:
        futures = [executor.submit(run_worker) for _ in range(n_workers)]
        for f in futures:
            f.result()

    return [r if r is not None else Result.fail(BatchCancelled("cancelled")) for r in results]

