"""
Activity dataset parser.

Converts loosely structured CSV text into typed activity records.

Format:
    date,department,category,unit,amount
    # comment lines and blank lines are ignored
    2024-01-05,Ops,electricity,kWh,100

Columns are matched by (case-insensitive) header name, not position.
Rows whose date or amount cannot be parsed are dropped and reported as
malformed rows instead of failing the whole import.
"""

import csv
import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from dateutil import parser as dateutil_parser

from carbon_cue.pydantic_models.activity import (
    ActivityRecordPydModel,
    MalformedRowPydModel,
    ParseResult,
)
from carbon_cue.services.calculators.factor_matcher import FactorMatcher
from carbon_cue.services.calculators.unit_converter import UnitConverter
from carbon_cue.utils.constants import (
    COMMENT_PREFIX,
    MAX_ACTIVITY_AMOUNT,
    REQUIRED_COLUMNS,
    MalformedRowReason,
)
from carbon_cue.utils.exceptions import InvalidDatasetError

logger = logging.getLogger(__name__)

# Defaults differing in year, month and day
PARTIAL_DATE_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 2, 2))


class ActivityCSVParser:
    """
    Parser for uploaded activity datasets.

    Date handling: ISO ``YYYY-MM-DD`` is tried first, then dateutil's generic
    parser. Ambiguous numeric dates such as ``01/02/2024`` are read
    month-first unless ``dayfirst`` is set.
    """

    def __init__(self, dayfirst: bool = False, factor_matcher: FactorMatcher | None = None):
        self.dayfirst = dayfirst
        self.factor_matcher = factor_matcher or FactorMatcher()

    @staticmethod
    def _is_skipped(line: str) -> bool:
        stripped = line.strip()
        return not stripped or stripped.startswith(COMMENT_PREFIX)

    @staticmethod
    def _split(line: str) -> list[str]:
        return next(csv.reader([line], skipinitialspace=True))

    def parse(self, text: str) -> ParseResult:
        """
        Parse dataset text.

        Args:
            text: Raw CSV text with a header line

        Returns:
            ParseResult with records in input order and dropped rows

        Raises:
            InvalidDatasetError: If the header lacks a required column
        """
        content = [
            (line_number, line)
            for line_number, line in enumerate(text.splitlines(), start=1)
            if not self._is_skipped(line)
        ]
        if not content:
            logger.info("Dataset is empty")
            return ParseResult()

        _, header_line = content[0]
        header = [column.strip().lower() for column in self._split(header_line)]

        missing = [column for column in REQUIRED_COLUMNS if column not in header]
        if missing:
            raise InvalidDatasetError(
                f"Dataset header is missing required columns: {', '.join(missing)}",
                missing_columns=missing,
            )

        result = ParseResult()
        for line_number, line in content[1:]:
            values = self._split(line)
            row = {
                column: values[idx].strip() if idx < len(values) else ""
                for idx, column in enumerate(header)
            }

            record_date = self.parse_date(row["date"])
            if record_date is None:
                logger.debug(f"Dropping line {line_number}: invalid date '{row['date']}'")
                result.malformed_rows.append(
                    MalformedRowPydModel(
                        line_number=line_number,
                        reason=MalformedRowReason.INVALID_DATE,
                        raw=line,
                    )
                )
                continue

            amount = self.parse_amount(row["amount"])
            if amount is None:
                logger.debug(f"Dropping line {line_number}: invalid amount '{row['amount']}'")
                result.malformed_rows.append(
                    MalformedRowPydModel(
                        line_number=line_number,
                        reason=MalformedRowReason.INVALID_AMOUNT,
                        raw=line,
                    )
                )
                continue

            category = FactorMatcher.normalize(row["category"])
            result.records.append(
                ActivityRecordPydModel(
                    date=record_date,
                    department=row["department"],
                    category=category,
                    kind=self.factor_matcher.exact_match(category),
                    unit=row["unit"],
                    amount=amount,
                )
            )

        logger.info(
            f"Parsed {len(result.records)} records, "
            f"dropped {len(result.malformed_rows)} malformed rows"
        )
        return result

    def parse_date(self, value: str) -> Optional[date]:
        """
        Parse a calendar date, or return None.

        dateutil fills missing parts from its ``default``; parsing against
        two different defaults exposes partial dates such as ``March`` or
        ``15``, which are rejected.
        """
        if not value:
            return None
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            parsed = [
                dateutil_parser.parse(value, dayfirst=self.dayfirst, default=default)
                for default in PARTIAL_DATE_DEFAULTS
            ]
        except (ValueError, OverflowError):
            return None
        if parsed[0].date() != parsed[1].date():
            return None
        return parsed[0].date()

    @staticmethod
    def parse_amount(value: str) -> Optional[Decimal]:
        """Parse a finite amount between 0 and MAX_ACTIVITY_AMOUNT, or return None."""
        try:
            amount = UnitConverter.normalize_number(value)
        except (InvalidOperation, ValueError):
            return None
        if not amount.is_finite() or amount < 0 or amount > MAX_ACTIVITY_AMOUNT:
            return None
        return amount
