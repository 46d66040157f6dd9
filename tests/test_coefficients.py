import pytest

from coefficients import exponent_from_id, factor_query, highest_first, parse_coefficient, term_id, to_mapping
from utils import format_number, sequence_to_frame


def test_term_ids():
    assert term_id(3) == "x^3"
    assert exponent_from_id("x^3") == 3
    assert exponent_from_id(term_id(12)) == 12


@pytest.mark.parametrize("bad", ["", "x3", "x^-1", "y^2", "x^2.5", None])
def test_bad_term_id(bad):
    with pytest.raises(ValueError):
        exponent_from_id(bad)


def test_parse_coefficient():
    assert parse_coefficient("") == 0
    assert parse_coefficient("   ") == 0
    assert parse_coefficient(None) == 0
    assert parse_coefficient("3") == 3
    assert parse_coefficient("-2.5") == -2.5
    assert parse_coefficient("1e3") == 1000
    with pytest.raises(ValueError):
        parse_coefficient("abc")


def test_sequence_shapes():
    seq = [4, 3, 2, 1]
    assert to_mapping(seq) == {0: 4, 1: 3, 2: 2, 3: 1}
    assert highest_first(seq) == [1, 2, 3, 4]


def test_factor_query():
    assert factor_query([4.0, 0.0, -2.5, 1.0]) == {
        "degree": "3",
        "x^0": "4",
        "x^1": "0",
        "x^2": "-2.5",
        "x^3": "1",
    }
    with pytest.raises(ValueError):
        factor_query([])


def test_format_number():
    assert format_number(3.1415) == "3.14"
    assert format_number(-3) == "-3"
    assert format_number(2.0) == "2"
    assert format_number(-2.7) == "-2.7"


def test_sequence_to_frame():
    df = sequence_to_frame([4, 3, 2, 1])
    assert list(df.columns) == ["term", "coefficient"]
    assert list(df["term"]) == ["x^3", "x^2", "x", "1"]
    assert list(df["coefficient"]) == [1, 2, 3, 4]
