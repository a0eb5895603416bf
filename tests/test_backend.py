"""Tests for the backend event-delivery protocol.

Covers polling, the no-wait fast path, bounded waits, idle-event draining on
timeouts and data-less wakes, ordered delivery from a producer thread, and
decoder failure propagation.
"""

from __future__ import annotations

import threading
import time
import unittest
from unittest import mock

from termwin.backend import ECMA48Backend, EventQueue
from termwin.errors import TerminalReadError
from termwin.events import KeyPress, Resize, ResizeKind


class RecordingDecoder:
    """Decoder double backed by a real ``EventQueue``."""

    def __init__(self, idle_events: list | None = None) -> None:
        self.queue = EventQueue()
        self.idle_events = list(idle_events or [])
        self.drain_calls = 0
        self.idle_calls = 0
        self.shutdown_calls = 0

    @property
    def condition(self) -> threading.Condition:
        return self.queue.condition

    def has_pending_events(self) -> bool:
        return self.queue.has_pending()

    def drain_events(self) -> list:
        self.drain_calls += 1
        return self.queue.drain()

    def drain_idle_events(self) -> list:
        self.idle_calls += 1
        return list(self.idle_events)

    def shutdown(self) -> None:
        self.shutdown_calls += 1


def _backend(decoder: RecordingDecoder) -> tuple[ECMA48Backend, mock.Mock]:
    renderer = mock.Mock()
    return ECMA48Backend(decoder, renderer), renderer


class GetEventsTests(unittest.TestCase):
    def test_zero_timeout_poll_returns_immediately_when_empty(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)

        started = time.monotonic()
        events = backend.get_events(0)
        elapsed = time.monotonic() - started

        self.assertEqual(events, [])
        self.assertLess(elapsed, 0.05)
        self.assertEqual(decoder.drain_calls, 1)
        self.assertEqual(decoder.idle_calls, 0)

    def test_zero_timeout_poll_returns_queued_events(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)
        first, second = KeyPress("a"), KeyPress("b")
        decoder.queue.put(first)
        decoder.queue.put(second)

        self.assertEqual(backend.get_events(0), [first, second])
        self.assertEqual(backend.get_events(0), [])

    def test_pending_events_are_returned_without_waiting(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)
        event = KeyPress("UP")
        decoder.queue.put(event)

        started = time.monotonic()
        events = backend.get_events(5000)
        elapsed = time.monotonic() - started

        self.assertEqual(events, [event])
        self.assertLess(elapsed, 0.5)
        self.assertEqual(decoder.idle_calls, 0)

    def test_timeout_drains_idle_events_once(self) -> None:
        resize = Resize(ResizeKind.SCREEN, 100, 30)
        decoder = RecordingDecoder(idle_events=[resize])
        backend, _ = _backend(decoder)

        started = time.monotonic()
        events = backend.get_events(50)
        elapsed = time.monotonic() - started

        self.assertEqual(events, [resize])
        self.assertEqual(decoder.idle_calls, 1)
        self.assertEqual(decoder.drain_calls, 0)
        self.assertGreaterEqual(elapsed, 0.04)
        self.assertLess(elapsed, 0.5)

    def test_repeated_timeouts_drain_idle_events_once_per_wake(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)

        for _ in range(3):
            self.assertEqual(backend.get_events(10), [])

        self.assertEqual(decoder.idle_calls, 3)

    def test_wake_without_data_is_treated_like_a_timeout(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)
        stop = threading.Event()

        def notify_without_data() -> None:
            while not stop.is_set():
                with decoder.condition:
                    decoder.condition.notify_all()
                time.sleep(0.01)

        notifier = threading.Thread(target=notify_without_data, daemon=True)
        notifier.start()
        try:
            started = time.monotonic()
            events = backend.get_events(5000)
            elapsed = time.monotonic() - started
        finally:
            stop.set()
            notifier.join(1.0)

        self.assertEqual(events, [])
        self.assertEqual(decoder.idle_calls, 1)
        self.assertEqual(decoder.drain_calls, 0)
        self.assertLess(elapsed, 1.0)

    def test_event_arriving_during_wait_wakes_the_loop(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)
        event = KeyPress("x")

        def produce() -> None:
            time.sleep(0.05)
            decoder.queue.put(event)

        producer = threading.Thread(target=produce, daemon=True)
        producer.start()
        started = time.monotonic()
        events = backend.get_events(5000)
        elapsed = time.monotonic() - started
        producer.join(1.0)

        self.assertEqual(events, [event])
        self.assertLess(elapsed, 1.0)
        self.assertEqual(decoder.idle_calls, 0)

    def test_concurrent_producer_events_arrive_once_and_in_order(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)
        produced = [KeyPress(str(index)) for index in range(200)]

        def produce() -> None:
            for index, event in enumerate(produced):
                decoder.queue.put(event)
                if index % 17 == 0:
                    time.sleep(0.002)

        producer = threading.Thread(target=produce, daemon=True)
        producer.start()
        received: list = []
        deadline = time.monotonic() + 5.0
        while len(received) < len(produced) and time.monotonic() < deadline:
            received.extend(backend.get_events(20))
        producer.join(1.0)
        received.extend(backend.get_events(0))

        self.assertEqual([event.key for event in received], [event.key for event in produced])
        for got, expected in zip(received, produced):
            self.assertIs(got, expected)

    def test_negative_timeout_is_rejected(self) -> None:
        backend, _ = _backend(RecordingDecoder())

        with self.assertRaises(ValueError):
            backend.get_events(-1)

    def test_decoder_failure_surfaces_after_queued_events(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)
        event = KeyPress("q")
        decoder.queue.put(event)
        decoder.queue.fail(OSError("device gone"))

        self.assertEqual(backend.get_events(10), [event])
        with self.assertRaises(TerminalReadError) as ctx:
            backend.get_events(10)
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_failure_wakes_a_waiting_loop(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)

        def fail_later() -> None:
            time.sleep(0.05)
            decoder.queue.fail(OSError("read failed"))

        failer = threading.Thread(target=fail_later, daemon=True)
        failer.start()
        started = time.monotonic()
        with self.assertRaises(TerminalReadError):
            backend.get_events(5000)
        failer.join(1.0)

        self.assertLess(time.monotonic() - started, 1.0)
        self.assertEqual(decoder.idle_calls, 0)


class FlushAndShutdownTests(unittest.TestCase):
    def test_flush_screen_delegates_to_renderer(self) -> None:
        backend, renderer = _backend(RecordingDecoder())

        backend.flush_screen()
        backend.flush_screen()

        self.assertEqual(renderer.flush_physical.call_count, 2)

    def test_shutdown_delegates_once(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)

        backend.shutdown()
        backend.shutdown()

        self.assertEqual(decoder.shutdown_calls, 1)

    def test_with_block_shuts_down_when_setup_fails(self) -> None:
        decoder = RecordingDecoder()
        backend, _ = _backend(decoder)

        with self.assertRaises(MemoryError):
            with backend:
                raise MemoryError()

        self.assertEqual(decoder.shutdown_calls, 1)


class OpenTests(unittest.TestCase):
    def _patched_open(self, calls: list[str], clear_error: BaseException | None = None) -> ECMA48Backend:
        terminal = mock.Mock(width=80, height=24)
        terminal.start.side_effect = lambda: calls.append("start")
        terminal.shutdown.side_effect = lambda: calls.append("shutdown")
        screen = mock.Mock()

        def clear() -> None:
            calls.append("clear")
            if clear_error is not None:
                raise clear_error

        screen.clear_physical.side_effect = clear
        with mock.patch("termwin.terminal.TerminalController"), mock.patch(
            "termwin.terminal.ECMA48Terminal", return_value=terminal
        ), mock.patch("termwin.terminal.ECMA48Screen", return_value=screen):
            return ECMA48Backend.open(0, 1)

    def test_screen_is_cleared_after_entering_the_alternate_screen(self) -> None:
        calls: list[str] = []

        backend = self._patched_open(calls)

        self.assertEqual(calls, ["start", "clear"])
        self.assertEqual(backend.renderer.clear_physical.call_count, 1)

    def test_failed_clear_restores_the_terminal(self) -> None:
        calls: list[str] = []

        with self.assertRaises(OSError):
            self._patched_open(calls, OSError("write failed"))

        self.assertEqual(calls, ["start", "clear", "shutdown"])


if __name__ == "__main__":
    unittest.main()
