import asyncio
import logging

from dashboard.gestures import DragState, GestureResolver
from dashboard.timers import AsyncioScheduler, ManualScheduler


async def _until(predicate):
    while not predicate():
        await asyncio.sleep(0.005)


def _wait_until(predicate):
    return asyncio.wait_for(_until(predicate), 1.0)


# ============== AsyncioScheduler ==============

def test_coroutine_callback_runs_on_the_loop():
    fired = []
    scheduler = AsyncioScheduler()

    async def callback():
        await asyncio.sleep(0)
        fired.append("done")

    async def scenario():
        scheduler.call_later(0.01, callback)
        await _wait_until(lambda: fired)
        await _wait_until(lambda: not scheduler._tasks)

    asyncio.run(scenario())

    assert fired == ["done"]
    assert scheduler._tasks == set()


def test_plain_callback_starts_no_task():
    fired = []
    scheduler = AsyncioScheduler()

    async def scenario():
        scheduler.call_later(0.01, lambda: fired.append("done"))
        await _wait_until(lambda: fired)

    asyncio.run(scenario())

    assert fired == ["done"]
    assert scheduler._tasks == set()


def test_cancelled_timer_never_fires():
    fired = []
    scheduler = AsyncioScheduler()

    async def scenario():
        handle = scheduler.call_later(0.01, lambda: fired.append("done"))
        handle.cancel()
        await asyncio.sleep(0.05)

    asyncio.run(scenario())

    assert fired == []


def test_failing_callback_is_logged(caplog):
    scheduler = AsyncioScheduler()

    started = []

    async def callback():
        started.append(True)
        raise RuntimeError("boom")

    async def scenario():
        scheduler.call_later(0.01, callback)
        await _wait_until(lambda: started)
        await _wait_until(lambda: not scheduler._tasks)

    with caplog.at_level(logging.ERROR):
        asyncio.run(scenario())

    assert "Timer callback failed" in caplog.text
    assert "boom" in caplog.text
    assert scheduler._tasks == set()


def test_hold_reorders_with_real_timers(store, storage, document):
    scheduler = AsyncioScheduler()
    resolver = GestureResolver(store, scheduler, reorder_hold=0.01)
    resolver.apply(document)

    async def scenario():
        resolver.begin_drag(document.section("social").items[0])
        resolver.enter_item(document.section("social").items[2])
        await _wait_until(lambda: storage.writes == 1)
        await _wait_until(lambda: not scheduler._tasks)

    asyncio.run(scenario())

    assert [item.id for item in resolver.document.section("social").items] == ["reddit", "linkedin", "twitter"]
    assert resolver.state is DragState.DRAGGING


# ============== ManualScheduler ==============

def test_manual_timers_fire_in_due_order():
    fired = []
    scheduler = ManualScheduler()
    scheduler.call_later(0.5, lambda: fired.append("late"))
    scheduler.call_later(0.2, lambda: fired.append("early"))
    cancelled = scheduler.call_later(0.3, lambda: fired.append("cancelled"))
    cancelled.cancel()

    asyncio.run(scheduler.advance(0.25))
    assert fired == ["early"]
    assert scheduler.pending == 1

    asyncio.run(scheduler.advance(1.0))
    assert fired == ["early", "late"]
    assert scheduler.pending == 0
