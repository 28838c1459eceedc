import asyncio
from aiokafka import AIOKafkaProducer
from ..config import kafka
from ..logger import get_logger

logger = get_logger()

class KafkaNotifier:
    def __init__(self, topic: str = kafka.topic, producer_factory=None):
        self.topic = topic
        self.producer = None
        self.max_retries = kafka.max_retries
        self.retry_delay = kafka.retry_delay
        self._producer_factory = producer_factory or (lambda: AIOKafkaProducer(**kafka.producer_config))
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def start(self):
        """Start the Kafka producer"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            retry_count = 0
            while retry_count < self.max_retries:
                try:
                    self.producer = self._producer_factory()
                    await self.producer.start()
                    self._initialized = True
                    logger.info("Kafka producer initialized successfully")
                    return
                except Exception as e:
                    retry_count += 1
                    logger.error(f"Failed to initialize Kafka producer (attempt {retry_count}/{self.max_retries}): {e}")
                    if retry_count < self.max_retries:
                        await asyncio.sleep(self.retry_delay * retry_count)
                    else:
                        logger.error("Max retries reached for Kafka producer initialization")
                        raise

    async def publish(self, event_name: str, payload: str):
        """Send an event to the guesses topic, giving up after max_retries"""
        retry_count = 0
        while retry_count < self.max_retries:
            try:
                if not self._initialized:
                    await self.start()
                await self.producer.send(self.topic, key=event_name, value=payload)
                logger.debug(f"Published {event_name} to {self.topic}")
                return
            except Exception as e:
                retry_count += 1
                logger.error(f"Kafka error (attempt {retry_count}/{self.max_retries}): {e}")
                if retry_count < self.max_retries:
                    await asyncio.sleep(self.retry_delay * retry_count)
                else:
                    logger.error(f"Dropping {event_name} event after {self.max_retries} attempts")

    async def close(self):
        """Close Kafka producer"""
        if self.producer:
            try:
                await self.producer.stop()
                logger.info("Kafka producer stopped successfully")
            except Exception as e:
                logger.error(f"Error stopping Kafka producer: {e}")
        self.producer = None
        self._initialized = False
