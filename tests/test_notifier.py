import asyncio
from unittest.mock import AsyncMock

from geoguess.kafka import KafkaNotifier


class FakeProducer:
    def __init__(self, failures=0):
        self.failures = failures
        self.sent = []
        self.start = AsyncMock()
        self.stop = AsyncMock()

    async def send(self, topic, key=None, value=None):
        if self.failures:
            self.failures -= 1
            raise ConnectionError("broker unavailable")
        self.sent.append((topic, key, value))


def make_notifier(producer):
    notifier = KafkaNotifier(topic="guesses", producer_factory=lambda: producer)
    notifier.retry_delay = 0
    return notifier


def test_publish_sends_payload_keyed_by_event_name():
    producer = FakeProducer()
    notifier = make_notifier(producer)

    asyncio.run(notifier.publish("newGuess", '{"id": "abc"}'))

    producer.start.assert_awaited_once()
    assert producer.sent == [("guesses", "newGuess", '{"id": "abc"}')]


def test_publish_retries_transient_failures():
    producer = FakeProducer(failures=2)
    notifier = make_notifier(producer)

    asyncio.run(notifier.publish("newGuess", "{}"))

    assert producer.sent == [("guesses", "newGuess", "{}")]


def test_publish_gives_up_without_raising():
    producer = FakeProducer(failures=10)
    notifier = make_notifier(producer)

    asyncio.run(notifier.publish("newGuess", "{}"))

    assert producer.sent == []
    assert producer.failures == 10 - notifier.max_retries


def test_close_stops_producer():
    producer = FakeProducer()
    notifier = make_notifier(producer)

    async def run():
        await notifier.start()
        await notifier.close()

    asyncio.run(run())

    producer.stop.assert_awaited_once()
    assert notifier.producer is None
