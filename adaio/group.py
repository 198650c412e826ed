"""Groups: several feeds published and received together over one topic."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from adaio.data import Data
from adaio.transport import HttpResponse, Publisher, Subscription

__all__ = ["Group"]

DataCallback = Callable[[Data], None]


@dataclass(frozen=True)
class _GroupCallback:
    callback: DataCallback
    feed: str | None = None

    def wants(self, data: Data) -> bool:
        return self.feed is None or self.feed == data.feed_name


class Group:
    """A named group of feeds owned by the connection's user.

    ``io`` is a :class:`~adaio.transport.Connection` (or anything with
    ``username``, ``key``, ``mqtt`` and ``http``).
    """

    def __init__(self, io: Any, name: str) -> None:
        self.io = io
        self.name = name
        self.owner = io.username

        self.topic = f"{self.owner}/g/{self.name}/csv"
        self.get_topic = f"{self.topic}/get"
        self.group_url = f"/api/v2/{self.owner}/groups/{self.name}"
        self.create_url = f"/api/v2/{self.owner}/groups"

        self.data: list[Data] = []
        self._callbacks: list[_GroupCallback] = []

        self.subscription = Subscription(self.topic, self.sub_callback)
        self._pub = Publisher(io.mqtt, self.topic)
        self._get_pub = Publisher(io.mqtt, self.get_topic)
        io.mqtt.subscribe(self.subscription)

    def set(self, feed: str, value: str | bool | int | float) -> None:
        """Set the value to be saved for ``feed`` within the group."""
        self.get_feed(feed).set_value(value)

    def save(self) -> bool:
        """Publish every feed value of the group; False if there are none."""
        if not self.data:
            return False
        payload = "".join(f"{d.feed_name},{d.value}\n" for d in self.data)
        return self._pub.publish(payload)

    def get(self) -> bool:
        """Ask the broker to resend the group's retained values."""
        return self._get_pub.publish("")

    def get_feed(self, feed: str) -> Data:
        """Return the record for ``feed``, adding an empty one if it is new."""
        for record in self.data:
            if record.feed_name == feed:
                return record
        record = Data(feed)
        self.data.append(record)
        return record

    def on_message(self, callback: DataCallback, feed: str | None = None) -> None:
        """Register ``callback`` for all feeds, or for ``feed`` only.

        A callback for a feed that already has one is ignored.
        """
        if feed is not None and any(cb.feed == feed for cb in self._callbacks):
            return
        self._callbacks.append(_GroupCallback(callback, feed))

    def call(self, data: Data) -> None:
        """Hand ``data`` to every callback registered for its feed or for all."""
        for entry in self._callbacks:
            if entry.wants(data):
                entry.callback(data)

    def sub_callback(self, payload: str) -> None:
        """Handle an incoming ``feed,value`` per line message."""
        if not self._callbacks:
            return
        for line in filter(None, payload.split("\n")):
            tokens = [token for token in line.split(",") if token]
            if not tokens:
                continue
            name = tokens[0]
            # location lines are not handled
            if name == "location":
                continue
            if len(tokens) < 2:
                continue
            record = self.get_feed(name)
            record.set_value(tokens[1])
            self.call(record)

    def set_location(self, lat: float = 0, lon: float = 0, ele: float = 0) -> None:
        """Set the location on every feed record of the group."""
        for record in self.data:
            record.set_location(lat, lon, ele)

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
        """True if the group exists."""
        return self._request("GET", self.group_url).status == 200

    def create(self) -> bool:
        """Create the group; True if the server created it."""
        return self._request("POST", self.create_url, f"name={self.name}").status == 201

    def __repr__(self) -> str:
        return f"Group(name={self.name!r}, owner={self.owner!r})"