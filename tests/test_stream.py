"""Tests for the last-value stream."""

import threading
from decimal import Decimal

from currency_input.stream import ValueStream


class TestValueStream:
    """Tests for ValueStream."""

    def test_initial_value(self):
        assert ValueStream(Decimal(3)).value == Decimal(3)

    def test_publish_replaces_value(self):
        stream = ValueStream()
        stream.publish(Decimal("1.50"))
        assert stream.value == Decimal("1.50")

    def test_subscribers_receive_values(self):
        stream = ValueStream()
        received = []
        stream.subscribe(received.append)
        stream.publish(Decimal(1))
        stream.publish(None)
        assert received == [Decimal(1), None]

    def test_unsubscribe(self):
        stream = ValueStream()
        received = []
        unsubscribe = stream.subscribe(received.append)
        stream.publish(Decimal(1))
        unsubscribe()
        stream.publish(Decimal(2))
        assert received == [Decimal(1)]

    def test_unsubscribe_during_publish(self):
        """A subscriber removing itself does not disturb the current publish."""
        stream = ValueStream()
        received = []
        unsubscribe = None

        def once(value):
            received.append(value)
            unsubscribe()

        unsubscribe = stream.subscribe(once)
        stream.subscribe(received.append)
        stream.publish(Decimal(7))
        stream.publish(Decimal(8))
        assert received == [Decimal(7), Decimal(7), Decimal(8)]

    def test_readable_from_another_thread(self):
        stream = ValueStream()
        stream.publish(Decimal("42.00"))
        seen = []
        reader = threading.Thread(target=lambda: seen.append(stream.value))
        reader.start()
        reader.join()
        assert seen == [Decimal("42.00")]
