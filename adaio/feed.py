"""Feeds: publishing values, fetching the last one and receiving updates."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from adaio.data import Data
from adaio.transport import HttpResponse, Publisher, Subscription

__all__ = ["Feed"]

log = logging.getLogger(__name__)

DataCallback = Callable[[Data], None]


class Feed:
    """A named feed owned by a user, reachable over MQTT and HTTP.

    ``io`` is a :class:`~adaio.transport.Connection` (or anything with
    ``username``, ``key``, ``mqtt`` and ``http``). The owner defaults to the
    connection's user.
    """

    def __init__(self, io: Any, name: str, owner: str | None = None) -> None:
        self.io = io
        self.name = name
        self.owner = owner if owner is not None else io.username

        self.topic = f"{self.owner}/f/{self.name}/csv"
        self.get_topic = f"{self.topic}/get"
        self.feed_url = f"/api/v2/{self.owner}/feeds/{self.name}"
        self.create_url = f"/api/v2/{self.owner}/feeds"

        self.data = Data(self.name)
        self._callback: DataCallback | None = None

        self.subscription = Subscription(self.topic, self.sub_callback)
        self._pub = Publisher(io.mqtt, self.topic)
        self._get_pub = Publisher(io.mqtt, self.get_topic)
        io.mqtt.subscribe(self.subscription)

    def save(
        self,
        value: str | bool | int | float,
        lat: float = 0,
        lon: float = 0,
        ele: float = 0,
        precision: int = 6,
    ) -> bool:
        """Publish ``value`` with optional location; True if it was sent."""
        self.data.set_value(value, lat, lon, ele, precision)
        return self._pub.publish(self.data.to_csv())

    def get(self) -> bool:
        """Ask the broker to resend the feed's retained value."""
        return self._get_pub.publish("")

    def _request(self, method: str, path: str, body: str | None = None) -> HttpResponse:
        headers = {"X-AIO-Key": self.io.key}
        if body is not None:
            headers = {
                "Content-Type": "application/x-www-form-urlencoded",
                "Content-Length": str(len(body.encode("utf-8"))),
                **headers,
            }
        return self.io.http.request(method, path, headers, body)

    def exists(self) -> bool:
        """True if the feed exists for its owner."""
        return self._request("GET", self.feed_url).status == 200

    def create(self) -> bool:
        """Create the feed; True if the server created it."""
        return self._request("POST", self.create_url, f"name={self.name}").status == 201

    def last_value(self) -> Data | None:
        """Fetch the most recent value over HTTP, or None if there is none."""
        url = f"{self.feed_url}/data/retain"
        log.debug("last_value get %s", url)
        response = self._request("GET", url)
        if not response.ok:
            log.error(
                "error retrieving last value, status: %s, response body: %s",
                response.status,
                response.body,
            )
            return None
        if not response.body:
            return None
        return Data(self.name, response.body)

    def set_location(self, lat: float, lon: float, ele: float = 0) -> None:
        """Set the location sent with the next saved value."""
        self.data.set_location(lat, lon, ele)

    def on_message(self, callback: DataCallback | None) -> None:
        """Set the function called with the feed's data on each message."""
        self._callback = callback

    def sub_callback(self, payload: str) -> None:
        """Load an incoming CSV message and hand the data to the callback."""
        self.data.set_csv(payload)
        if self._callback is not None:
            self._callback(self.data)

    def __repr__(self) -> str:
        return f"Feed(name={self.name!r}, owner={self.owner!r})"