import threading
import time

from engine.fetcher import BatchCancelled, map_with_concurrency


def test_empty_input_issues_no_calls():
    calls = []
    assert map_with_concurrency([], 4, lambda item, i: calls.append(item)) == []
    assert calls == []


def test_partial_failure_keeps_siblings():
    def worker(item, index):
        if index == 2:
            raise RuntimeError("boom")
        return item.upper()

    results = map_with_concurrency(["a", "b", "c", "d", "e"], 4, worker)

    assert len(results) == 5
    assert [r.success for r in results] == [True, True, False, True, True]
    assert [r.value for r in results if r] == ["A", "B", "D", "E"]
    assert str(results[2].error) == "boom"


def test_results_follow_input_order_not_completion_order():
    def worker(item, index):
        time.sleep(0.01 * (5 - index))
        return index

    results = map_with_concurrency(list(range(5)), 5, worker)
    assert [r.value for r in results] == [0, 1, 2, 3, 4]


def test_in_flight_never_exceeds_concurrency():
    lock = threading.Lock()
    state = {"active": 0, "peak": 0}

    def worker(item, index):
        with lock:
            state["active"] += 1
            state["peak"] = max(state["peak"], state["active"])
        time.sleep(0.01)
        with lock:
            state["active"] -= 1
        return item

    results = map_with_concurrency(list(range(12)), 4, worker)
    assert all(results)
    assert 1 <= state["peak"] <= 4


def test_zero_concurrency_still_runs_one_worker():
    results = map_with_concurrency([1, 2], 0, lambda item, i: item * 2)
    assert [r.value for r in results] == [2, 4]


def test_cancel_stops_claiming_new_items():
    cancel = threading.Event()
    seen = []

    def worker(item, index):
        seen.append(item)
        cancel.set()
        return item

    results = map_with_concurrency([1, 2, 3, 4], 1, worker, cancel=cancel)

    assert seen == [1]
    assert results[0].value == 1
    assert all(isinstance(r.error, BatchCancelled) for r in results[1:])
