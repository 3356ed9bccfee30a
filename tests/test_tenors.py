import pytest

from rate_curves.errors import ConversionError, InvalidArgumentError, ParseError
from rate_curves.tenors import (
    Tenor,
    TenorUnit,
    from_days,
    parse,
    tenor,
    to_day_count,
    to_days,
)


def test_parse_units_and_days():
    tenors = [parse(s) for s in ("1D", "3W", "1M", "10y")]
    assert tenors == [
        Tenor(TenorUnit.DAYS, 1),
        Tenor(TenorUnit.WEEKS, 3),
        Tenor(TenorUnit.MONTHS, 1),
        Tenor(TenorUnit.YEARS, 10),
    ]
    assert [to_days(t) for t in tenors] == [1, 21, 30, 3650]


def test_ambiguous_forms_are_canonicalized():
    assert parse("7d") == parse("1W") == Tenor(TenorUnit.WEEKS, 1)
    assert parse("12M") == parse("1y") == Tenor(TenorUnit.YEARS, 1)
    assert parse("48m") == parse("4Y") == Tenor(TenorUnit.YEARS, 4)
    direct = Tenor(TenorUnit.DAYS, 14)
    assert direct.unit is TenorUnit.WEEKS and direct.multiplier == 2
    assert Tenor("M", 24) == parse("2Y")
    assert len({parse("7D"), parse("1W")}) == 1


def test_string_form_is_canonical_and_idempotent():
    assert str(tenor("1W")) == "1W"
    assert str(parse("14d")) == "2W"
    assert str(parse("36m")) == "3Y"
    for text in ("1D", "6D", "7D", "3W", "5M", "12M", "18m", "48M", "30y"):
        assert parse(str(parse(text))) == parse(text)


def test_comparisons_with_tenors_strings_and_day_counts():
    t1 = parse("1M")
    t2 = parse("2M")
    assert t1 < t2
    assert t1 > "1W"
    assert t1 > 28
    assert 32 > t1
    assert t1 == 30
    assert not (31 == t1)
    assert "6W" < t2
    assert "2M" == t2
    assert t1 == "1M"
    assert t1 <= 30 and t1 >= "30D"


def test_equal_day_counts_do_not_make_distinct_tenors_equal():
    months, weeks = parse("7M"), parse("30W")
    assert to_days(months) == to_days(weeks) == 210
    assert months != weeks
    assert months <= weeks and months >= weeks


def test_from_days_prefers_coarsest_unit():
    assert from_days(12) == parse("12D")
    assert from_days(14) == parse("2W")
    assert from_days(21) == parse("3W")
    assert from_days(60) == parse("2M")
    assert from_days(365) == parse("1y")
    assert from_days(730).unit is TenorUnit.YEARS


def test_from_days_skips_months_that_would_become_years():
    result = from_days(360)
    assert result.unit is TenorUnit.DAYS
    assert to_days(result) == 360


def test_day_count_round_trips():
    for n in range(1, 1000):
        assert to_days(from_days(n)) == n
    for text in ("1D", "2W", "5M", "11M", "1Y", "25Y"):
        t = parse(text)
        assert from_days(to_days(t)) == t


@pytest.mark.parametrize("value", [0, -1, 1.5, "10", True])
def test_from_days_rejects_invalid_input(value):
    with pytest.raises(ConversionError):
        from_days(value)


@pytest.mark.parametrize("text", ["1X", "D", "xD", "-1D", "+1D", "1.5Y", " 1D", "0M", ""])
def test_parse_rejects_malformed_strings(text):
    with pytest.raises(ParseError):
        parse(text)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError, match="X is not a valid tenor unit"):
        parse("1X")


def test_direct_construction_validates_multiplier():
    with pytest.raises(InvalidArgumentError):
        Tenor(TenorUnit.WEEKS, 0)
    with pytest.raises(InvalidArgumentError):
        Tenor(TenorUnit.DAYS, 2.0)


def test_to_day_count_accepts_numbers_tenors_and_strings():
    assert to_day_count(5.5) == 5.5
    assert to_day_count(parse("3W")) == 21.0
    assert to_day_count("1y") == 365.0


def test_tenors_hash_like_their_day_counts():
    assert parse("1W") == 7
    assert 7 in {parse("1W"): "one week"}
    assert parse("1M") in {30, 60}
    assert len({parse("7D"), parse("1W")}) == 1
