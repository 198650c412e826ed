"""Transport interfaces used by feeds, groups, dashboards and blocks."""

from __future__ import annotations

import http.client
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

__all__ = [
    "Connection",
    "HttpClient",
    "HttpResponse",
    "HttpsClient",
    "MqttClient",
    "Publisher",
    "Subscription",
]

MessageCallback = Callable[[str], None]


class Subscription:
    """An MQTT topic subscription that hands incoming payloads to a callback."""

    def __init__(self, topic: str, callback: MessageCallback | None = None) -> None:
        self.topic = topic
        self.callback = callback

    def deliver(self, payload: str) -> None:
        """Pass ``payload`` to the callback, if one is set."""
        if self.callback is not None:
            self.callback(payload)

    def __repr__(self) -> str:
        return f"Subscription(topic={self.topic!r})"


class MqttClient(ABC):
    """Base for MQTT clients: keeps subscriptions and routes messages to them."""

    def __init__(self) -> None:
        self.subscriptions: list[Subscription] = []

    def subscribe(self, subscription: Subscription) -> None:
        """Register ``subscription`` for messages on its topic."""
        self.subscriptions.append(subscription)

    def dispatch(self, topic: str, payload: str) -> int:
        """Deliver an incoming message; return how many subscriptions got it."""
        matching = [sub for sub in self.subscriptions if sub.topic == topic]
        for sub in matching:
            sub.deliver(payload)
        return len(matching)

    @abstractmethod
    def publish(self, topic: str, payload: str) -> bool:
        """Publish ``payload`` on ``topic``; return whether it was sent."""


class Publisher:
    """Publishes payloads to one fixed topic through an MQTT client."""

    def __init__(self, mqtt: MqttClient, topic: str) -> None:
        self.mqtt = mqtt
        self.topic = topic

    def publish(self, payload: str) -> bool:
        """Publish ``payload`` on this publisher's topic."""
        return self.mqtt.publish(self.topic, payload)

    def __repr__(self) -> str:
        return f"Publisher(topic={self.topic!r})"


@dataclass(frozen=True)
class HttpResponse:
    """Status code and decoded body of an HTTP response."""

    status: int
    body: str = ""

    @property
    def ok(self) -> bool:
        """True for a 2xx status."""
        return 200 <= self.status <= 299


class HttpClient(ABC):
    """Base for HTTP clients issuing requests against the REST API."""

    @abstractmethod
    def request(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str],
        body: str | None = None,
    ) -> HttpResponse:
        """Send a request and return the whole response."""


class HttpsClient(HttpClient):
    """HTTP client over TLS using the standard library."""

    def __init__(self, host: str, port: int = 443) -> None:
        self.host = host
        self.port = port

    def request(
        self,
        method: str,
        path: str,
        headers: Mapping[str, str],
        body: str | None = None,
    ) -> HttpResponse:
        """Send a request over a fresh connection and read the whole body."""
        conn = http.client.HTTPSConnection(self.host, self.port)
        try:
            payload = body.encode("utf-8") if body is not None else None
            conn.request(method, path, body=payload, headers=dict(headers))
            response = conn.getresponse()
            text = response.read().decode("utf-8", errors="replace")
            return HttpResponse(response.status, text)
        finally:
            conn.close()


@dataclass
class Connection:
    """Account credentials together with the MQTT and HTTP transports."""

    username: str
    key: str
    mqtt: MqttClient
    http: HttpClient | None = field(default=None)