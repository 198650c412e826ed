import pytest

from adaio.csvfields import UnterminatedQuoteError, count_fields, parse_csv


def _quote(fields):
    return ",".join('"' + field.replace('"', '""') + '"' for field in fields)


def test_plain_fields_are_split_on_commas():
    assert parse_csv("a,b,c") == ["a", "b", "c"]


def test_single_field():
    assert parse_csv("42") == ["42"]


def test_empty_line_is_one_empty_field():
    assert parse_csv("") == [""]
    assert count_fields("") == 1


def test_quoted_field_keeps_commas():
    assert parse_csv('"x,y",1') == ["x,y", "1"]


def test_doubled_quote_is_literal():
    assert parse_csv('"say ""hi""",2') == ['say "hi"', "2"]


def test_quote_in_middle_of_field_opens_quoted_run():
    assert parse_csv('ab"c,d"e') == ["abc,de"]


def test_empty_fields_are_kept():
    assert parse_csv(",,") == ["", "", ""]


def test_parsing_stops_at_nul():
    assert parse_csv("a,b\0,c,d") == ["a", "b"]


@pytest.mark.parametrize("line", ['"open', 'a,"b', '"x""'])
def test_unterminated_quote_raises(line):
    with pytest.raises(UnterminatedQuoteError):
        parse_csv(line)
    with pytest.raises(ValueError):
        count_fields(line)


@pytest.mark.parametrize(
    "line",
    ["a,b,c", '"x,y",1', "", "1.5,2.5,3.5,4.5", '"q""q",,end'],
)
def test_count_matches_parsed_length(line):
    assert count_fields(line) == len(parse_csv(line))


@pytest.mark.parametrize(
    "fields",
    [
        ["plain"],
        ["with,comma", "two"],
        ['quote "inside"', "", "x"],
        ["", ""],
        ['""', ",", '","'],
    ],
)
def test_quoted_round_trip(fields):
    assert parse_csv(_quote(fields)) == fields