"""Tests for the debounced scan trigger."""

from __future__ import annotations

import asyncio
import logging

import pytest

from spellscan.constants import ScanCause, TriggerState
from spellscan.trigger import ScanTrigger

DELAY = 0.1


class _Recorder:
    def __init__(self) -> None:
        self.causes: list[ScanCause] = []
        self.states: list[TriggerState] = []
        self.trigger: ScanTrigger | None = None

    def __call__(self, cause: ScanCause) -> None:
        self.causes.append(cause)
        if self.trigger is not None:
            self.states.append(self.trigger.state)


def _make() -> tuple[ScanTrigger, _Recorder]:
    recorder = _Recorder()
    trigger = ScanTrigger(recorder, delay=DELAY)
    recorder.trigger = trigger
    return trigger, recorder


def test_initial_scans_immediately() -> None:
    trigger, recorder = _make()
    trigger.initial()
    assert recorder.causes == [ScanCause.INITIAL]
    assert recorder.states == [TriggerState.SCANNING]
    assert trigger.state == TriggerState.IDLE
    assert trigger.scan_count == 1


@pytest.mark.asyncio
async def test_interaction_scans_after_delay() -> None:
    trigger, recorder = _make()
    trigger.interaction()
    assert trigger.state == TriggerState.PENDING_SCAN
    assert trigger.pending is True
    assert recorder.causes == []

    await asyncio.sleep(DELAY * 3)
    assert recorder.causes == [ScanCause.INTERACTION]
    assert trigger.state == TriggerState.IDLE
    assert trigger.pending is False


@pytest.mark.asyncio
async def test_burst_collapses_to_one_scan() -> None:
    """N interactions inside the window → exactly one scan."""
    trigger, recorder = _make()
    for _ in range(5):
        trigger.interaction()
        await asyncio.sleep(DELAY / 10)
    assert recorder.causes == []

    await asyncio.sleep(DELAY * 3)
    assert recorder.causes == [ScanCause.INTERACTION]


@pytest.mark.asyncio
async def test_separate_bursts_scan_separately() -> None:
    trigger, recorder = _make()
    trigger.interaction()
    await asyncio.sleep(DELAY * 3)
    trigger.interaction()
    await asyncio.sleep(DELAY * 3)
    assert len(recorder.causes) == 2


@pytest.mark.asyncio
async def test_manual_cancels_pending_scan() -> None:
    """Manual rescan runs now and no trailing debounced scan follows."""
    trigger, recorder = _make()
    trigger.interaction()
    trigger.request_rescan()
    assert recorder.causes == [ScanCause.MANUAL]
    assert trigger.pending is False

    await asyncio.sleep(DELAY * 3)
    assert recorder.causes == [ScanCause.MANUAL]


@pytest.mark.asyncio
async def test_cancel_drops_pending_scan() -> None:
    trigger, recorder = _make()
    trigger.interaction()
    trigger.cancel()
    assert trigger.state == TriggerState.IDLE
    await asyncio.sleep(DELAY * 3)
    assert recorder.causes == []


def test_interaction_requires_running_loop() -> None:
    trigger, _ = _make()
    with pytest.raises(RuntimeError):
        trigger.interaction()


@pytest.mark.asyncio
async def test_failing_debounced_scan_is_logged(
    caplog: pytest.LogCaptureFixture,
) -> None:
    def boom(cause: ScanCause) -> None:
        raise ValueError("scan exploded")

    trigger = ScanTrigger(boom, delay=DELAY)
    with caplog.at_level(logging.ERROR, logger="spellscan.trigger"):
        trigger.interaction()
        await asyncio.sleep(DELAY * 3)
    assert "event=debounced_scan_failed" in caplog.text
    assert trigger.state == TriggerState.IDLE


def test_failing_manual_scan_propagates() -> None:
    def boom(cause: ScanCause) -> None:
        raise ValueError("scan exploded")

    trigger = ScanTrigger(boom, delay=DELAY)
    with pytest.raises(ValueError, match="scan exploded"):
        trigger.request_rescan()
    assert trigger.state == TriggerState.IDLE


@pytest.mark.asyncio
async def test_scan_that_rearms_timer_stays_pending() -> None:
    causes: list[ScanCause] = []

    def rearm(cause: ScanCause) -> None:
        causes.append(cause)
        if cause == ScanCause.MANUAL:
            trigger.interaction()

    trigger = ScanTrigger(rearm, delay=DELAY)
    trigger.request_rescan()
    assert trigger.state == TriggerState.PENDING_SCAN
    assert trigger.pending is True

    await asyncio.sleep(DELAY * 3)
    assert causes == [ScanCause.MANUAL, ScanCause.INTERACTION]
    assert trigger.state == TriggerState.IDLE
