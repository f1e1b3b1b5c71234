"""
Service tests for the activity CSV parser following kkb_fastapi pattern.
"""

from datetime import date
from decimal import Decimal

import pytest

from carbon_cue.services.parsers.csv_parser import ActivityCSVParser
from carbon_cue.utils.constants import (
    MAX_ACTIVITY_AMOUNT,
    EmissionCategory,
    MalformedRowReason,
)
from carbon_cue.utils.exceptions import InvalidDatasetError

HEADER = "date,department,category,unit,amount"


def test_parse_basic_dataset(sample_csv):
    result = ActivityCSVParser().parse(sample_csv)

    assert result.malformed_rows == []
    assert len(result.records) == 2

    electricity, car = result.records
    assert electricity.date == date(2024, 1, 5)
    assert electricity.department == "Ops"
    assert electricity.kind == EmissionCategory.ELECTRICITY
    assert electricity.emission == Decimal("82")
    assert car.kind == EmissionCategory.TRANSPORT_CAR
    assert car.emission == Decimal("8.5335")


def test_header_is_matched_by_name_not_position():
    text = "Amount,Unit,Category,Department,Date\n100,kWh,Electricity,Ops,2024-01-05\n"

    result = ActivityCSVParser().parse(text)

    assert len(result.records) == 1
    record = result.records[0]
    assert record.category == "electricity"
    assert record.amount == Decimal("100")
    assert record.date == date(2024, 1, 5)


def test_comment_and_blank_lines_are_skipped():
    text = (
        "# exported from the facilities tracker\n"
        "\n"
        f"{HEADER}\n"
        "# January\n"
        "   \n"
        "2024-01-05,Ops,electricity,kWh,100\n"
    )

    result = ActivityCSVParser().parse(text)

    assert len(result.records) == 1
    assert result.malformed_rows == []


def test_empty_input_gives_empty_result():
    result = ActivityCSVParser().parse("")

    assert result.records == []
    assert result.malformed_rows == []


def test_header_only_gives_no_records():
    result = ActivityCSVParser().parse(f"{HEADER}\n")

    assert result.records == []


def test_missing_required_columns_raises():
    with pytest.raises(InvalidDatasetError) as exc_info:
        ActivityCSVParser().parse("date,department,amount\n2024-01-05,Ops,100\n")

    assert exc_info.value.missing_columns == ["category", "unit"]
    assert "category" in exc_info.value.message


@pytest.mark.parametrize(
    "amount",
    ["abc", "", "-5", "nan", "inf", "1e40", "9e999999"],
)
def test_invalid_amount_drops_row(amount):
    text = f"{HEADER}\n2024-01-05,Ops,electricity,kWh,{amount}\n2024-01-06,Ops,electricity,kWh,10\n"

    result = ActivityCSVParser().parse(text)

    assert len(result.records) == 1
    assert result.records[0].amount == Decimal("10")
    assert len(result.malformed_rows) == 1
    malformed = result.malformed_rows[0]
    assert malformed.reason == MalformedRowReason.INVALID_AMOUNT
    assert malformed.line_number == 2


def test_invalid_date_drops_row_and_is_reported_first():
    text = f"{HEADER}\nnot-a-date,Ops,electricity,kWh,abc\n"

    result = ActivityCSVParser().parse(text)

    assert result.records == []
    assert result.malformed_rows[0].reason == MalformedRowReason.INVALID_DATE
    assert result.malformed_rows[0].raw == "not-a-date,Ops,electricity,kWh,abc"


def test_line_numbers_count_skipped_lines():
    text = f"# note\n{HEADER}\n\n2024-02-30,Ops,electricity,kWh,1\n"

    result = ActivityCSVParser().parse(text)

    assert result.malformed_rows[0].line_number == 4


def test_amount_with_thousands_separator():
    text = f'{HEADER}\n2024-01-05,Ops,electricity,kWh,"1,200"\n'

    result = ActivityCSVParser().parse(text)

    assert result.records[0].amount == Decimal("1200")


def test_zero_amount_is_valid():
    result = ActivityCSVParser().parse(f"{HEADER}\n2024-01-05,Ops,waste,kg,0\n")

    assert result.records[0].emission == Decimal("0")


def test_unknown_category_counts_as_zero():
    result = ActivityCSVParser().parse(f"{HEADER}\n2024-01-05,Ops,Office_Paper,kg,25\n")

    record = result.records[0]
    assert record.category == "office_paper"
    assert record.kind == EmissionCategory.UNKNOWN
    assert record.emission == Decimal("0")


def test_meat_is_a_known_category():
    result = ActivityCSVParser().parse(f"{HEADER}\n2024-01-05,Canteen,meat,meal,2\n")

    assert result.records[0].emission == Decimal("30")


def test_ambiguous_dates_are_month_first_by_default():
    text = f"{HEADER}\n01/02/2024,Ops,electricity,kWh,1\n"

    assert ActivityCSVParser().parse(text).records[0].date == date(2024, 1, 2)
    assert ActivityCSVParser(dayfirst=True).parse(text).records[0].date == date(2024, 2, 1)


def test_short_row_fills_missing_fields():
    result = ActivityCSVParser().parse(f"{HEADER}\n2024-01-05,Ops,electricity\n")

    assert result.records == []
    assert result.malformed_rows[0].reason == MalformedRowReason.INVALID_AMOUNT


def test_largest_accepted_amount():
    result = ActivityCSVParser().parse(f"{HEADER}\n2024-01-05,Ops,electricity,kWh,1e15\n")

    assert result.malformed_rows == []
    assert result.records[0].amount == MAX_ACTIVITY_AMOUNT


@pytest.mark.parametrize(
    "value",
    ["March", "15", "February 2024", "10:30"],
)
def test_partial_dates_drop_row(value):
    text = f"{HEADER}\n{value},Ops,electricity,kWh,1\n2024-01-06,Ops,electricity,kWh,10\n"

    result = ActivityCSVParser().parse(text)

    assert len(result.records) == 1
    assert len(result.malformed_rows) == 1
    assert result.malformed_rows[0].reason == MalformedRowReason.INVALID_DATE
    assert result.malformed_rows[0].line_number == 2


def test_full_written_date_is_parsed():
    text = f'{HEADER}\n"March 5, 2024",Ops,electricity,kWh,1\n'

    result = ActivityCSVParser().parse(text)

    assert result.malformed_rows == []
    assert result.records[0].date == date(2024, 3, 5)
