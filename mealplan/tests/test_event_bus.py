import unittest
from mealplan.events.Event_Bus import EventBus
from mealplan.events.event_helpers import MEAL_PLAN_UPDATED, publish_plan_updated


class TestEventBus(unittest.TestCase):

    def test_subscribe_once_and_unsubscribe(self):
        bus = EventBus()
        received = []
        listener = lambda name, payload: received.append(payload)
        bus.subscribe("x", listener)
        bus.subscribe("x", listener)
        self.assertEqual(bus.publish("x", 1), 1)
        self.assertTrue(bus.unsubscribe("x", listener))
        self.assertFalse(bus.unsubscribe("x", listener))
        self.assertFalse(bus.has_listeners("x"))
        self.assertEqual(bus.publish("x", 2), 0)
        self.assertEqual(received, [1])

    def test_subscribe_returns_remover(self):
        bus = EventBus()
        remove = bus.subscribe("x", lambda name, payload: None)
        self.assertTrue(bus.has_listeners("x"))
        remove()
        self.assertFalse(bus.has_listeners("x"))

    def test_failing_listener_is_skipped(self):
        bus = EventBus()
        received = []

        def boom(name, payload):
            raise ValueError("bad listener")

        bus.subscribe("x", boom)
        bus.subscribe("x", lambda name, payload: received.append(payload))
        with self.assertLogs("mealplan.events.Event_Bus", level="ERROR"):
            self.assertEqual(bus.publish("x", "payload"), 1)
        self.assertEqual(received, ["payload"])

    def test_plan_updated_payload(self):
        bus = EventBus()
        received = []
        bus.subscribe(MEAL_PLAN_UPDATED, lambda name, payload: received.append(payload))
        publish_plan_updated("m1", ["2025-03-05", "2025-03-03"], "copy_day", bus=bus)
        self.assertEqual(received, [{"member_id": "m1", "dates": ["2025-03-03", "2025-03-05"], "action": "copy_day"}])


if __name__ == '__main__':
    unittest.main()
