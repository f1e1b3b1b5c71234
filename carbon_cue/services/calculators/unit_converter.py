"""
Number handling utilities for emissions calculations.

Stateless helpers shared by the parser, calculators and formatters.
"""

from decimal import ROUND_HALF_UP, Decimal


class UnitConverter:
    """
    Unit conversion service.

    Converts and rounds Decimal quantities used in emissions calculations.
    """

    # Conversion constants
    KG_TO_TONNES = Decimal("0.001")
    MILLISECONDS_PER_SECOND = 1000

    @staticmethod
    def kg_to_tonnes(kg: float | Decimal) -> Decimal:
        """
        Convert kilograms to tonnes.

        Args:
            kg: Mass in kilograms

        Returns:
            Mass in tonnes as Decimal
        """

        if isinstance(kg, float):
            kg = Decimal(str(kg))
        return kg * UnitConverter.KG_TO_TONNES

    @staticmethod
    def normalize_number(value: str | int | float | Decimal) -> Decimal:
        """
        Normalize a number value to Decimal.

        Handles string inputs with commas and surrounding whitespace, ints,
        floats, and existing Decimals.

        Args:
            value: Number value in various formats

        Returns:
            Normalized Decimal value

        Raises:
            decimal.InvalidOperation: If the string is not a number

        Example:
            >>> UnitConverter.normalize_number(" 1,234.56 ")
            Decimal('1234.56')
        """

        if isinstance(value, Decimal):
            return value

        if isinstance(value, str):
            value = value.replace(",", "").strip()

        return Decimal(str(value))

    @staticmethod
    def round_half_up(value: Decimal, places: int) -> Decimal:
        """
        Round to a fixed number of decimal places, halves away from zero.

        Example:
            >>> UnitConverter.round_half_up(Decimal("2.345"), 2)
            Decimal('2.35')
        """
        exponent = Decimal(1).scaleb(-places)
        return value.quantize(exponent, rounding=ROUND_HALF_UP)
