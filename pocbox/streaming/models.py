"""Configuration and message models for the streaming service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class KafkaConnection:
    """Where to reach the Kafka brokers."""

    brokers: list[str] = field(default_factory=list)


@dataclass
class KafkaTopics:
    """Topic names and the consumer group used by default."""

    default_producer: str = ""
    default_consumer: str = ""
    default_consumer_group: str = ""


@dataclass
class KafkaProperties:
    """All Kafka related settings."""

    connection: KafkaConnection = field(default_factory=KafkaConnection)
    topics: KafkaTopics = field(default_factory=KafkaTopics)


@dataclass
class ServerConfiguration:
    """HTTP server settings."""

    port: int = 0
    mode: str = ""
    log_level: str = ""


@dataclass
class AppConfiguration:
    """The root of the application configuration."""

    kafka: KafkaProperties = field(default_factory=KafkaProperties)
    server: ServerConfiguration = field(default_factory=ServerConfiguration)


@dataclass(frozen=True)
class ProduceMessageRequest:
    """A request to publish one keyed message."""

    key: str
    message: str


@dataclass(frozen=True)
class Record:
    """A single message as it travels to or from a topic."""

    key: bytes
    value: bytes
    topic: str = ""
    partition: int = 0
    offset: int = 0


def _lookup(data: Mapping[Any, Any], name: str) -> Any:
    """Find ``name`` in ``data``, preferring an exact key, then ignoring case."""
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if str(key).lower() == lowered:
            return value
    return None


def _section(data: Mapping[Any, Any], name: str) -> Mapping[Any, Any]:
    value = _lookup(data, name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{name!r} must be a mapping, got {type(value).__name__}")
    return value


def _as_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return str(value)
    raise ValueError(f"{name!r} must be a string, got {type(value).__name__}")


def _as_int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        if not value:
            return 0
        try:
            return int(value, 0)
        except ValueError:
            raise ValueError(f"{name!r} must be an integer, got {value!r}") from None
    raise ValueError(f"{name!r} must be an integer, got {type(value).__name__}")


def _as_str_list(value: Any, name: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split(",") if value else []
    if isinstance(value, (list, tuple)):
        return [_as_str(item, name) for item in value]
    return [_as_str(value, name)]


def app_configuration_from_mapping(data: Mapping[Any, Any]) -> AppConfiguration:
    """Build an :class:`AppConfiguration` from nested mappings such as parsed YAML.

    Keys match without regard to case; missing keys keep their zero values and
    scalar values are converted loosely where the meaning is unambiguous.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"configuration must be a mapping, got {type(data).__name__}")
    kafka = _section(data, "kafka")
    connection = _section(kafka, "connection")
    topics = _section(kafka, "topics")
    server = _section(data, "server")
    return AppConfiguration(
        kafka=KafkaProperties(
            connection=KafkaConnection(
                brokers=_as_str_list(_lookup(connection, "brokers"), "brokers"),
            ),
            topics=KafkaTopics(
                default_producer=_as_str(
                    _lookup(topics, "default-producer"), "default-producer"
                ),
                default_consumer=_as_str(
                    _lookup(topics, "default-consumer"), "default-consumer"
                ),
                default_consumer_group=_as_str(
                    _lookup(topics, "default-consumer-group"), "default-consumer-group"
                ),
            ),
        ),
        server=ServerConfiguration(
            port=_as_int(_lookup(server, "port"), "port"),
            mode=_as_str(_lookup(server, "mode"), "mode"),
            log_level=_as_str(_lookup(server, "loglevel"), "loglevel"),
        ),
    )


def parse_produce_request(payload: Any) -> ProduceMessageRequest:
    """Validate a decoded JSON body; both ``key`` and ``message`` are required."""
    if not isinstance(payload, Mapping):
        raise ValueError("request body must be a JSON object")
    fields = {}
    for name in ("key", "message"):
        value = _lookup(payload, name)
        if value is None:
            raise ValueError(f"field {name!r} is required")
        if not isinstance(value, str):
            raise ValueError(f"field {name!r} must be a string")
        if not value:
            raise ValueError(f"field {name!r} is required")
        fields[name] = value
    return ProduceMessageRequest(key=fields["key"], message=fields["message"])