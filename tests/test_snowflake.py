import itertools

import pytest

from jylib.snowflake import Worker, snow_id

EPOCH = 1525705533000


def test_id_layout():
    worker = Worker(5, clock=lambda: EPOCH + 1000)
    ident = worker.next_id()
    assert ident >> 22 == 1000
    assert (ident >> 12) & 1023 == 5
    assert ident & 4095 == 0


def test_sequence_within_same_millisecond():
    worker = Worker(1, clock=lambda: EPOCH + 50)
    ids = [worker.next_id() for _ in range(3)]
    assert [i & 4095 for i in ids] == [0, 1, 2]


def test_sequence_resets_on_new_millisecond():
    ticks = iter([EPOCH + 10, EPOCH + 10, EPOCH + 11])
    worker = Worker(2, clock=lambda: next(ticks))
    ids = [worker.next_id() for _ in range(3)]
    assert ids[2] & 4095 == 0
    assert ids[2] >> 22 == 11


def test_sequence_overflow_waits_for_next_millisecond():
    base = EPOCH + 500
    ticks = itertools.chain(itertools.repeat(base, 4097), itertools.repeat(base + 1))
    worker = Worker(3, clock=lambda: next(ticks))
    ids = [worker.next_id() for _ in range(4097)]
    assert ids[4095] & 4095 == 4095
    assert ids[4096] >> 22 == 501
    assert ids[4096] & 4095 == 0
    assert (ids[4096] >> 12) & 1023 == 3


@pytest.mark.parametrize("worker_id", [-1, 1024])
def test_invalid_worker_id(worker_id):
    with pytest.raises(ValueError):
        Worker(worker_id)


def test_real_clock_ids_unique_and_increasing():
    worker = Worker(7)
    ids = [worker.next_id() for _ in range(5000)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_snow_id_increasing():
    first = snow_id()
    second = snow_id()
    assert second > first > 0