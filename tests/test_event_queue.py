"""Tests for the condition-guarded event queue."""

from __future__ import annotations

import unittest

from termwin.backend import EventQueue
from termwin.errors import TerminalReadError
from termwin.events import KeyPress


class EventQueueTests(unittest.TestCase):
    def test_drain_returns_events_in_order_and_empties_queue(self) -> None:
        queue = EventQueue()
        events = [KeyPress("a"), KeyPress("b"), KeyPress("c")]
        for event in events:
            queue.put(event)

        self.assertTrue(queue.has_pending())
        self.assertEqual(len(queue), 3)
        self.assertEqual(queue.drain(), events)
        self.assertFalse(queue.has_pending())
        self.assertEqual(queue.drain(), [])

    def test_methods_are_reentrant_under_the_condition(self) -> None:
        queue = EventQueue()
        with queue.condition:
            queue.put(KeyPress("a"))
            self.assertTrue(queue.has_pending())
            self.assertEqual(len(queue.drain()), 1)

    def test_failure_is_pending_and_raised_after_events(self) -> None:
        queue = EventQueue()
        queue.put(KeyPress("a"))
        queue.fail(EOFError("closed"))

        self.assertEqual([event.key for event in queue.drain()], ["a"])
        self.assertTrue(queue.has_pending())
        with self.assertRaises(TerminalReadError):
            queue.drain()


if __name__ == "__main__":
    unittest.main()
