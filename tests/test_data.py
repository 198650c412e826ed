import pytest

from adaio.data import HIGH, LOW, Data, format_double


def test_feed_name_from_constructor():
    data = Data("temperature")
    assert data.feed_name == "temperature"
    assert data.value == ""


def test_constructor_parses_csv():
    data = Data("f", '"hello",1.5,2.5,3.5')
    assert data.value == "hello"
    assert (data.lat, data.lon, data.ele) == (1.5, 2.5, 3.5)


def test_set_csv_four_fields_succeeds():
    data = Data("f")
    assert data.set_csv("7,10.25,-20.5,100") is True
    assert data.value == "7"
    assert data.lat == 10.25
    assert data.lon == -20.5
    assert data.ele == 100.0


def test_set_csv_value_only():
    data = Data("f")
    assert data.set_csv("42") is True
    assert data.value == "42"


def test_set_csv_too_many_fields_fails_but_sets_value():
    data = Data("f")
    assert data.set_csv("a,1,2,3,4") is False
    assert data.value == "a"


def test_set_csv_unterminated_quote_fails_and_keeps_value():
    data = Data("f")
    data.set_value("before")
    assert data.set_csv('"open,1,2') is False
    assert data.value == "before"


def test_set_csv_quoted_comma():
    data = Data("f")
    assert data.set_csv('"a,b",1,2,3') is True
    assert data.value == "a,b"
    assert data.lat == 1.0


def test_set_value_bool():
    data = Data("f")
    data.set_value(True)
    assert data.value == "1"
    data.set_value(False)
    assert data.value == "0"


def test_set_value_int_round_trip():
    data = Data("f")
    data.set_value(-1234)
    assert data.to_int() == -1234


def test_set_value_float_round_trip():
    data = Data("f")
    data.set_value(3.25, precision=2)
    assert data.to_float() == 3.25
    assert len(data.value.split(".")[1]) == 2


def test_set_value_string_and_location():
    data = Data("f")
    data.set_value("hi", 1.5, 2.5, 3.5)
    assert str(data) == "hi"
    assert (data.lat, data.lon, data.ele) == (1.5, 2.5, 3.5)


def test_set_value_rejects_unsupported_type():
    with pytest.raises(TypeError):
        Data("f").set_value([1, 2])


def test_zero_location_is_ignored():
    data = Data("f")
    data.set_location(4.5, 5.5, 6.5)
    data.set_location(0, 0, 0)
    assert (data.lat, data.lon, data.ele) == (4.5, 5.5, 6.5)


@pytest.mark.parametrize("text", ["1", "t", "true", "True", "TRUE"])
def test_truthy_values(text):
    data = Data("f")
    data.set_value(text)
    assert data.to_bool() is True
    assert data.is_false() is False
    assert data.to_pin_level() == HIGH


@pytest.mark.parametrize("text", ["0", "", "false", "yes", "10"])
def test_falsy_values(text):
    data = Data("f")
    data.set_value(text)
    assert data.is_true() is False
    assert data.is_false() is True
    assert data.to_pin_level() == LOW


def test_numeric_prefix_parsing():
    data = Data("f")
    data.set_value("12abc")
    assert data.to_int() == 12
    data.set_value("2.5xyz")
    assert data.to_float() == 2.5
    data.set_value("abc")
    assert data.to_int() == 0
    assert data.to_float() == 0.0


def test_unsigned_int_wraps_negative():
    data = Data("f")
    data.set_value("-1")
    assert data.to_unsigned_int() == 4294967295
    data.set_value("7")
    assert data.to_unsigned_int() == 7


@pytest.mark.parametrize("rgb", [(255, 128, 0), (0, 0, 0), (18, 52, 86)])
def test_color_components_round_trip(rgb):
    red, green, blue = rgb
    data = Data("f")
    data.set_value(f"#{red:02x}{green:02x}{blue:02x}")
    assert (data.to_red(), data.to_green(), data.to_blue()) == rgb
    assert data.to_neopixel() == (red << 16) | (green << 8) | blue


def test_color_of_short_value_is_zero():
    data = Data("f")
    data.set_value("#")
    assert (data.to_red(), data.to_neopixel()) == (0, 0)


def test_to_csv_default_record():
    data = Data("f")
    data.set_value("1")
    assert data.to_csv() == '"1",0.000000,0.000000,0.00'


def test_to_csv_round_trip():
    source = Data("f")
    source.set_value("hi", 1.5, -2.5, 3.5)
    copy = Data("f", source.to_csv())
    assert copy.value == "hi"
    assert (copy.lat, copy.lon, copy.ele) == (1.5, -2.5, 3.5)


def test_format_double():
    assert format_double(1.5) == "1.500000"
    assert float(format_double(-0.25, 2)) == -0.25
    assert format_double(2.0, 2).endswith(".00")