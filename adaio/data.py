"""Data records exchanged with feeds: a value plus optional location."""

from __future__ import annotations

import re

from adaio.csvfields import UnterminatedQuoteError, parse_csv

__all__ = ["HIGH", "LOW", "Data", "format_double"]

HIGH = 1
LOW = 0

_UNSIGNED_INT_RANGE = 2**32
_DEFAULT_PRECISION = 6
_LOCATION_EPSILON = 0.000001

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_HEX_PREFIX = re.compile(r"[0-9a-fA-F]+")


def _leading_float(text: str) -> float:
    """Parse the longest leading number in ``text``; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group().strip()) if match else 0.0


def _leading_int(text: str) -> int:
    """Parse the leading decimal integer in ``text``; 0 if there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group().strip()) if match else 0


def _leading_hex(text: str) -> int:
    """Parse the leading hexadecimal digits in ``text``; 0 if there are none."""
    match = _HEX_PREFIX.match(text)
    return int(match.group(), 16) if match else 0


def _fixed(value: float, precision: int) -> str:
    if precision < 0:
        precision = _DEFAULT_PRECISION
    return f"{value:.{precision}f}"


def format_double(d: float, precision: int = _DEFAULT_PRECISION) -> str:
    """Format ``d`` in fixed-point notation with ``precision`` decimals."""
    return _fixed(float(d), precision)


class Data:
    """A single data point: value text for a named feed, with location."""

    def __init__(self, feed_name: str = "", csv: str | None = None) -> None:
        self.feed_name = feed_name
        self.value = ""
        self.lat = 0.0
        self.lon = 0.0
        self.ele = 0.0
        if csv is not None:
            self.set_csv(csv)

    def set_csv(self, csv: str) -> bool:
        """Load ``value,lat,lon,ele`` from a CSV line.

        Returns True when the line held at most four fields and parsed,
        False when it held more fields or an unterminated quote.
        """
        try:
            fields = parse_csv(csv)
        except UnterminatedQuoteError:
            return False

        self.value = fields[0]
        location = fields[1:]
        for name, text in zip(("lat", "lon", "ele"), location):
            setattr(self, name, _leading_float(text))
        return len(location) <= 3

    def set_location(self, lat: float, lon: float, ele: float = 0) -> None:
        """Set the location, unless all three coordinates are zero."""
        if all(abs(c) < _LOCATION_EPSILON for c in (lat, lon, ele)):
            return
        self.lat = float(lat)
        self.lon = float(lon)
        self.ele = float(ele)

    def set_value(
        self,
        value: str | bool | int | float,
        lat: float = 0,
        lon: float = 0,
        ele: float = 0,
        precision: int = _DEFAULT_PRECISION,
    ) -> None:
        """Set the value from text, a bool, an int or a float, and the location.

        Booleans become ``"1"`` or ``"0"``; floats are written with
        ``precision`` decimals.
        """
        if isinstance(value, bool):
            self.value = "1" if value else "0"
        elif isinstance(value, int):
            self.value = str(value)
        elif isinstance(value, float):
            self.value = _fixed(value, precision)
        elif isinstance(value, str):
            self.value = value
        else:
            raise TypeError(f"unsupported value type: {type(value).__name__}")
        self.set_location(lat, lon, ele)

    def to_bool(self) -> bool:
        """True for ``"1"`` or any value starting with ``t`` or ``T``."""
        return self.value == "1" or self.value[:1] in ("t", "T")

    def is_true(self) -> bool:
        """Same as :meth:`to_bool`."""
        return self.to_bool()

    def is_false(self) -> bool:
        """The negation of :meth:`to_bool`."""
        return not self.to_bool()

    def to_int(self) -> int:
        """Leading decimal integer of the value, 0 if there is none."""
        return _leading_int(self.value)

    def to_unsigned_int(self) -> int:
        """Leading integer of the value, wrapped to a 32-bit unsigned range."""
        return _leading_int(self.value) % _UNSIGNED_INT_RANGE

    def to_float(self) -> float:
        """Leading number of the value, 0.0 if there is none."""
        return _leading_float(self.value)

    def to_pin_level(self) -> int:
        """:data:`HIGH` when the value is true, otherwise :data:`LOW`."""
        return HIGH if self.is_true() else LOW

    def to_red(self) -> int:
        """Red component of a ``#RRGGBB`` value."""
        return _leading_hex(self.value[1:3])

    def to_green(self) -> int:
        """Green component of a ``#RRGGBB`` value."""
        return _leading_hex(self.value[3:5])

    def to_blue(self) -> int:
        """Blue component of a ``#RRGGBB`` value."""
        return _leading_hex(self.value[5:7])

    def to_neopixel(self) -> int:
        """The ``#RRGGBB`` value as one packed 24-bit colour number."""
        return _leading_hex(self.value[1:7])

    def to_csv(self) -> str:
        """The record as a ``"value",lat,lon,ele`` line."""
        return (
            f'"{self.value}",{format_double(self.lat)},'
            f"{format_double(self.lon)},{format_double(self.ele, 2)}"
        )

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return (
            f"Data(feed_name={self.feed_name!r}, value={self.value!r}, "
            f"lat={self.lat}, lon={self.lon}, ele={self.ele})"
        )