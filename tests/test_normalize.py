import pytest

from batstats.ingest import NormalizationError, normalize, to_raw
from tests.factories import raw_row


def test_normalize_builds_typed_record():
    record = normalize(raw_row())

    assert record.player_link == "ruth-babe"
    assert record.season == 1927
    assert record.homeruns == 60
    assert record.rbi == 165
    assert record.strikeouts == pytest.approx(89.0)
    assert record.on_base_plus_slugging == pytest.approx(1.258)


@pytest.mark.parametrize("value", ["--", "", "   ", " -- "])
def test_optional_sentinel_and_blank_are_absent(value):
    record = normalize(
        raw_row(
            rbi=value,
            strikeouts=value,
            stolen_bases=value,
            caught_stealing=value,
            on_base_percentage=value,
            on_base_plus_slugging=value,
        )
    )

    assert record.rbi is None
    assert record.strikeouts is None
    assert record.stolen_bases is None
    assert record.caught_stealing is None
    assert record.on_base_percentage is None
    assert record.on_base_plus_slugging is None


def test_optional_missing_column_is_absent():
    record = normalize(raw_row(rbi=None, on_base_percentage=None))

    assert record.rbi is None
    assert record.on_base_percentage is None


def test_rbi_examples():
    assert normalize(raw_row(rbi="--")).rbi is None
    assert normalize(raw_row(rbi="88")).rbi == 88
    with pytest.raises(NormalizationError) as excinfo:
        normalize(raw_row(rbi="abc"))
    assert excinfo.value.field == "rbi"
    assert excinfo.value.value == "abc"


@pytest.mark.parametrize(
    "field, value",
    [
        ("stolen_bases", "n/a"),
        ("caught_stealing", "1.5"),
        ("on_base_percentage", ".4x"),
        ("strikeouts", "lots"),
        ("rbi", "1_0"),
        ("rbi", "\u0663"),
        ("stolen_bases", "\uff15"),
        ("on_base_percentage", "1_0.5"),
        ("on_base_plus_slugging", "\u0660.9"),
        ("strikeouts", "inf"),
    ],
)
def test_optional_junk_fails_row(field, value):
    with pytest.raises(NormalizationError) as excinfo:
        normalize(raw_row(**{field: value}))
    assert excinfo.value.field == field


@pytest.mark.parametrize(
    "field, value",
    [
        ("homeruns", "--"),
        ("homeruns", ""),
        ("hits", "many"),
        ("season", "1927.5"),
        ("batting_average", "--"),
        ("slugging_percentage", "nan"),
        ("last_name", "  "),
        ("player_link", None),
        ("homeruns", "6_0"),
        ("hits", "\u0661\u0669\u0662"),
        ("batting_average", "0_.356"),
    ],
)
def test_required_fields_reject_missing_or_malformed(field, value):
    with pytest.raises(NormalizationError) as excinfo:
        normalize(raw_row(**{field: value}))
    assert excinfo.value.field == field


def test_negative_counting_stat_fails_row():
    with pytest.raises(NormalizationError) as excinfo:
        normalize(raw_row(walks="-3"))
    assert excinfo.value.field == "walks"


def test_whitespace_is_trimmed():
    record = normalize(raw_row(homeruns=" 54 ", rbi=" 137 ", team=" NYY ", first_name="  "))

    assert record.homeruns == 54
    assert record.rbi == 137
    assert record.team == "NYY"
    assert record.first_name is None
    assert record.display_first_name == "N/A"


def test_error_reports_line_number():
    with pytest.raises(NormalizationError) as excinfo:
        normalize(raw_row(rbi="abc"), line=7)

    assert excinfo.value.line == 7
    assert str(excinfo.value).startswith("line 7: rbi='abc'")


def test_normalizing_rendered_record_is_idempotent():
    original = normalize(raw_row(rbi="--", first_name="", on_base_percentage="", strikeouts="--"))

    rendered = to_raw(original)
    assert rendered.rbi == "--"
    assert normalize(rendered) == original


@pytest.mark.parametrize("value", ["+88", "0088"])
def test_plain_signed_or_padded_integers_parse(value):
    assert normalize(raw_row(rbi=value)).rbi == 88


@pytest.mark.parametrize("value, expected", [(".486", 0.486), ("1.", 1.0), ("4.86e-1", 0.486)])
def test_plain_decimal_forms_parse(value, expected):
    assert normalize(raw_row(on_base_percentage=value)).on_base_percentage == pytest.approx(expected)


def test_undecodable_bytes_fail_row():
    with pytest.raises(NormalizationError) as excinfo:
        normalize(raw_row(first_name="Jos\udce9"), line=5)

    assert excinfo.value.field == "first_name"
    assert "not valid UTF-8" in str(excinfo.value)
