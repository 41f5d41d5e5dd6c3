"""Per-partition consumption of fetched records."""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from pocbox.streaming.models import KafkaTopics, Record

MessageHandler = Callable[[bytes, bytes], None]

TOPIC_PARTITIONS = 3
REPLICATION_FACTOR = -1
CREATE_TOPICS_TIMEOUT = 5.0
RECORD_BUFFER = 10

_WAIT = 0.05


@dataclass
class Fetches:
    """The outcome of one poll: records by topic and partition, and fetch errors."""

    records: dict[str, dict[int, list[Record]]] = field(default_factory=dict)
    errors: list[tuple[str, int, Exception]] = field(default_factory=list)
    client_closed: bool = False


class FetchClient(Protocol):
    def poll_fetches(self) -> Fetches: ...


class TopicAdmin(Protocol):
    def create_topics(
        self,
        names: list[str],
        num_partitions: int,
        replication_factor: int,
        timeout: float,
    ) -> Any: ...


class PartitionConsumer:
    """Processes the record batches of one topic partition in order."""

    def __init__(
        self,
        topic: str,
        partition: int,
        handler: MessageHandler | None,
        buffer: int = RECORD_BUFFER,
    ) -> None:
        self.topic = topic
        self.partition = partition
        self.handler = handler
        self.thread: threading.Thread | None = None
        self._quit = threading.Event()
        self._records: queue.Queue[list[Record]] = queue.Queue(maxsize=buffer)

    def submit(self, records: Iterable[Record]) -> bool:
        """Queue a batch, waiting for room; return False if the consumer stopped first."""
        batch = list(records)
        while not self._quit.is_set():
            try:
                self._records.put(batch, timeout=_WAIT)
                return True
            except queue.Full:
                continue
        return False

    def stop(self) -> None:
        """Ask the consumer to quit."""
        self._quit.set()

    def consume(self) -> None:
        """Handle queued batches until :meth:`stop` is called."""
        print(f"starting, t {self.topic} p {self.partition}")
        try:
            while True:
                if self._quit.is_set():
                    print(f"quitting, t {self.topic} p {self.partition}")
                    return
                try:
                    batch = self._records.get(timeout=_WAIT)
                except queue.Empty:
                    continue
                self._handle(batch)
        finally:
            print(f"killing, t {self.topic} p {self.partition}")

    def _handle(self, batch: list[Record]) -> None:
        if self.handler is None:
            return
        for record in batch:
            try:
                self.handler(record.key, record.value)
            except Exception as exc:
                print(f"Error handling message: {exc}")


class SplitConsumer:
    """Runs one :class:`PartitionConsumer` per assigned partition."""

    def __init__(self, handler: MessageHandler | None) -> None:
        self.handler = handler
        self.consumers: dict[str, dict[int, PartitionConsumer]] = {}
        self._lock = threading.Lock()

    def assigned(self, assigned: Mapping[str, Iterable[int]]) -> None:
        """Start a consumer for each newly assigned partition."""
        with self._lock:
            for topic, partitions in assigned.items():
                topic_consumers = self.consumers.setdefault(topic, {})
                for partition in partitions:
                    consumer = PartitionConsumer(topic, partition, self.handler)
                    topic_consumers[partition] = consumer
                    consumer.thread = threading.Thread(
                        target=consumer.consume,
                        name=f"consume-{topic}-{partition}",
                        daemon=True,
                    )
                    consumer.thread.start()

    def lost(self, lost: Mapping[str, Iterable[int]]) -> None:
        """Stop and forget the consumers of revoked or lost partitions."""
        with self._lock:
            for topic, partitions in lost.items():
                topic_consumers = self.consumers.get(topic, {})
                for partition in partitions:
                    consumer = topic_consumers.pop(partition, None)
                    if not topic_consumers:
                        self.consumers.pop(topic, None)
                    if consumer is None:
                        raise KeyError(f"no consumer for topic {topic} partition {partition}")
                    consumer.stop()

    def dispatch(self, fetches: Fetches) -> int:
        """Hand fetched batches to their partition consumers; return how many were taken."""
        for _topic, _partition, error in fetches.errors:
            print("Error in fetches:", error)
        delivered = 0
        for topic, partitions in fetches.records.items():
            with self._lock:
                topic_consumers = dict(self.consumers.get(topic, {}))
            if not topic_consumers:
                continue
            for partition, records in partitions.items():
                consumer = topic_consumers.get(partition)
                if consumer is not None and consumer.submit(records):
                    delivered += 1
        return delivered

    def poll(self, client: FetchClient) -> None:
        """Poll ``client`` and dispatch until it reports that it is closed."""
        while True:
            fetches = client.poll_fetches()
            if fetches.client_closed:
                print("Client is closed, stopping consumption")
                return
            self.dispatch(fetches)


def process_kafka_message(key: bytes, value: bytes) -> None:
    """Default handler: report the message."""
    print(
        "Processing Kafka message with key: "
        f"{key.decode('utf-8', 'replace')}, value: {value.decode('utf-8', 'replace')}"
    )


def create_topics(admin: TopicAdmin, topics: KafkaTopics) -> None:
    """Create the producer and consumer topics, accepting ones that already exist."""
    try:
        admin.create_topics(
            [topics.default_producer, topics.default_consumer],
            num_partitions=TOPIC_PARTITIONS,
            replication_factor=REPLICATION_FACTOR,
            timeout=CREATE_TOPICS_TIMEOUT,
        )
    except Exception as exc:
        if "TOPIC_ALREADY_EXISTS" in str(exc):
            return
        raise RuntimeError(
            f"failed to create topics {topics.default_producer} and/or "
            f"{topics.default_consumer}: {exc}"
        ) from exc