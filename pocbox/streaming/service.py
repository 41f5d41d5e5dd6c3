"""Publishing messages to the default topic."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from pocbox.streaming.models import ProduceMessageRequest, Record

PRODUCE_TIMEOUT = 5.0

DeliveryCallback = Callable[[Record, "Exception | None"], None]


class Producer(Protocol):
    def produce(
        self, record: Record, on_delivery: DeliveryCallback, timeout: float
    ) -> None: ...


class KafkaService:
    """Sends produce requests to a client without waiting for delivery."""

    def __init__(self, client: Producer) -> None:
        self.client = client

    def produce_message(self, message: ProduceMessageRequest) -> None:
        """Hand the message to the client; the outcome is reported when it arrives."""
        record = Record(key=message.key.encode("utf-8"), value=message.message.encode("utf-8"))
        self.client.produce(record, _report_delivery, timeout=PRODUCE_TIMEOUT)


def _report_delivery(record: Record, error: Exception | None) -> None:
    if error is not None:
        print(f"record had a produce error: {error}")
    else:
        print(
            f"Successfully produced record to {record.topic} "
            f"[{record.partition}] at offset {record.offset}"
        )