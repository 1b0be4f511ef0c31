# tests/unit/test_concurrency.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading

import pytest

from sigdispatch import AlreadyBoundError, AmbiguousPatternError, DispatchTable


def test_tables_do_not_share_locks():
    assert DispatchTable()._lock is not DispatchTable()._lock


def test_lock_released_after_rejected_registration():
    table = DispatchTable().register(["string"])
    with pytest.raises(AmbiguousPatternError):
        table.register(["any"])
    assert not table._lock.locked()

    table.bind(len)
    with pytest.raises(AlreadyBoundError):
        table.bind(len)
    assert not table._lock.locked()


def test_transform_and_target_run_without_lock():
    held = []
    table = DispatchTable()

    def transform(value):
        held.append(table._lock.locked())
        # Re-entrant registration from a transform must not deadlock.
        table.register(["number"] * (len(table) + 1))
        return [value]

    def target(value):
        held.append(table._lock.locked())
        return value

    table.register(["string"], transform).bind(target)
    assert table("x") == "x"
    assert held == [False, False]


def test_concurrent_identical_registrations_admit_one():
    table = DispatchTable()
    barrier = threading.Barrier(8)
    errors = []

    def worker():
        barrier.wait()
        try:
            table.register(["string", "number"])
        except AmbiguousPatternError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(table) == 1
    assert len(errors) == 7


def test_concurrent_bind_admits_one():
    table = DispatchTable().register([])
    barrier = threading.Barrier(5)
    bound = []
    errors = []

    def worker(index):
        barrier.wait()
        try:
            table.bind(lambda: index)
            bound.append(index)
        except AlreadyBoundError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(bound) == 1
    assert len(errors) == 4
    assert table() == bound[0]


def test_invoke_while_registering():
    table = DispatchTable().register(["number"]).bind(lambda n: n * 2)
    results = []

    def caller():
        for i in range(200):
            results.append(table(i))

    def registrar():
        for size in range(2, 40):
            table.register(["number"] * size)

    threads = [threading.Thread(target=caller), threading.Thread(target=registrar)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == [i * 2 for i in range(200)]
    assert len(table) == 39
