"""HTTP routes of the streaming service."""

from __future__ import annotations

from typing import Protocol

from flask import Flask, jsonify, request

from pocbox.streaming.models import ProduceMessageRequest, parse_produce_request


class MessageProducer(Protocol):
    def produce_message(self, message: ProduceMessageRequest) -> None: ...


def setup_routes(app: Flask, kafka_service: MessageProducer) -> Flask:
    """Register ``POST /produce`` on ``app`` and return it."""

    @app.post("/produce")
    def produce():
        try:
            message = parse_produce_request(request.get_json(force=True, silent=True))
        except ValueError:
            return jsonify({"error": "Invalid input"}), 400
        kafka_service.produce_message(message)
        return jsonify({"message": "Message produced successfully!"}), 202

    return app


def create_app(kafka_service: MessageProducer) -> Flask:
    """Build the Flask application with its routes."""
    return setup_routes(Flask(__name__), kafka_service)