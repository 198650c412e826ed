# adaio

Client objects for an IoT data service. Feeds, groups and the time service
are mapped to MQTT topics and CSV payloads. A feed or a group can be checked
for and created with HTTP requests.

You supply the transports. Pass in an object that holds your user name and
key, an MQTT client and an HTTP client. `adaio.transport.Connection` is such
an object. The `adaio.transport` module also defines the interfaces the
clients must follow:

- `MqttClient` is abstract. Subclass it and implement `publish(topic, payload)`.
  It keeps `Subscription`s. Its `dispatch(topic, payload)` passes an incoming
  message to every subscription on that topic.
- `HttpClient` is abstract. Its `request(method, path, headers, body)`
  returns an `HttpResponse`, which holds `status`, `body` and `ok`.
- `HttpsClient` is an `HttpClient` built on the standard library's
  `http.client`. It opens one TLS connection for each request.
- `Publisher` sends payloads to one fixed topic.

## Install

```
pip install adaio
pip install "adaio[test]"   # to run the tests
```

## Modules

- `adaio.data`
  - `Data` is one record: a value for a named feed, with latitude, longitude
    and elevation.
  - `set_csv` reads a `value,lat,lon,ele` line. It returns False when the
    line has an unterminated quote or more than four fields.
  - `to_csv` writes `"value",lat,lon,ele`.
  - `set_value` accepts text, a bool (stored as `"1"`/`"0"`), an int or a
    float. A float is written with `precision` decimals.
  - `set_location` ignores an all-zero location.
  - The value is converted by `to_bool`, `is_true`, `is_false`, `to_int`,
    `to_unsigned_int`, `to_float` and `to_pin_level`. For a `#RRGGBB` value
    there are also `to_red`, `to_green`, `to_blue` and `to_neopixel`.
  - `format_double` writes a number in fixed-point notation.
- `adaio.csvfields`
  - `parse_csv` and `count_fields` split one line, following double-quote
    escaping.
  - Both raise `UnterminatedQuoteError` (a `ValueError`) on an open quote.
- `adaio.feed`
  - `Feed(io, name, owner=None)` publishes to `<owner>/f/<name>/csv` with
    `save`.
  - `get` asks for the retained value.
  - `exists`, `create` and `last_value` work over HTTP.
  - `on_message` sets a callback. The callback receives the feed's `Data`.
- `adaio.group`
  - `Group(io, name)` collects values with `set` and publishes them together
    as `feed,value` lines with `save`.
  - `on_message(callback, feed=None)` registers a callback for the whole
    group or for one of its feeds.
  - `get`, `exists` and `create` work as they do for feeds.
- `adaio.timeservice`
  - `TimeService(io, format)` subscribes to `time/seconds`, `time/millis` or
    `time/ISO-8601`. These are chosen by `TimeFormat`.
  - The last message received is kept in `data`.

## Example

```python
from adaio.feed import Feed
from adaio.transport import Connection, HttpsClient, MqttClient


class PrintingMqtt(MqttClient):
    def publish(self, topic, payload):
        print(topic, payload)
        return True


io = Connection("user", "placeholder", PrintingMqtt(), HttpsClient("io.example.com"))
feed = Feed(io, "temperature")
feed.on_message(lambda data: print(data.feed_name, data.to_float()))
feed.save(21.5, precision=2)   # prints: user/f/temperature/csv "21.50",...
io.mqtt.dispatch("user/f/temperature/csv", "22.0")
```

## What it does not do

- It has no MQTT network client of its own. Connecting to a broker, keeping
  the connection alive and reading incoming packets are up to your
  `MqttClient` subclass. That subclass passes incoming messages on through
  `dispatch`.
- It does not manage dashboards or dashboard blocks.
- It has no command-line program.