from __future__ import annotations

import threading
import time

from mbquery.platform.musicbrainz import RequestScheduler

from tests.conftest import FakeClock


def test_first_admission_does_not_wait(fake_clock: FakeClock) -> None:
    scheduler = RequestScheduler(1.0, clock=fake_clock, sleep=fake_clock.sleep)

    scheduler.admit()

    assert fake_clock.sleeps == []
    assert scheduler.last_admission == 100.0


def test_second_admission_waits_in_half_delay_steps(fake_clock: FakeClock) -> None:
    scheduler = RequestScheduler(1.0, clock=fake_clock, sleep=fake_clock.sleep)

    scheduler.admit()
    scheduler.admit()

    assert fake_clock.sleeps == [0.5, 0.5]
    assert scheduler.last_admission == 101.0


def test_admission_after_idle_period_is_immediate(fake_clock: FakeClock) -> None:
    scheduler = RequestScheduler(1.0, clock=fake_clock, sleep=fake_clock.sleep)
    scheduler.admit()
    fake_clock.now += 5.0

    scheduler.admit()

    assert fake_clock.sleeps == []


def test_non_positive_delay_disables_throttling(fake_clock: FakeClock) -> None:
    scheduler = RequestScheduler(0, clock=fake_clock, sleep=fake_clock.sleep)

    for _ in range(5):
        scheduler.admit()
    scheduler.delay = -1
    scheduler.admit()

    assert fake_clock.sleeps == []
    assert scheduler.last_admission is None


def test_delay_changes_apply_to_the_next_admission(fake_clock: FakeClock) -> None:
    scheduler = RequestScheduler(1.0, clock=fake_clock, sleep=fake_clock.sleep)
    scheduler.admit()
    fake_clock.now += 0.3

    scheduler.delay = 0.2
    scheduler.admit()

    assert fake_clock.sleeps == []
    assert scheduler.last_admission == 100.3


def test_concurrent_admissions_are_spaced_by_delay() -> None:
    delay = 0.05
    threads_count = 5
    reading = threading.local()

    def clock() -> float:
        reading.now = time.monotonic()
        return reading.now

    scheduler = RequestScheduler(delay, clock=clock)
    admitted: list[float] = []
    guard = threading.Lock()

    def worker() -> None:
        scheduler.admit()
        # The last clock reading of this thread is the timestamp it was admitted at.
        with guard:
            admitted.append(reading.now)

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert len(admitted) == threads_count
    ordered = sorted(admitted)
    gaps = [later - earlier for earlier, later in zip(ordered, ordered[1:])]
    assert all(gap >= delay for gap in gaps), gaps
