"""Small worked examples and the parts of a Kafka-style message service."""

__version__ = "0.1.0"