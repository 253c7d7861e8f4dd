"""Value converter tests."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from pathlib import PurePosixPath

import pytest
from mapping_schema_creator.value_conversion import (
    Conversion,
    DocumentValueConverter,
    EnumRepresentation,
)
from sample_entities import Color, Money, Priority


def test_default_conversions_change_representation_types() -> None:
    converter = DocumentValueConverter()

    assert converter.representation_type_of(Decimal) is str
    assert converter.representation_type_of(date) is datetime
    assert converter.representation_type_of(PurePosixPath) is str
    assert converter.representation_type_of(int) is int
    assert converter.representation_type_of(object) is object


def test_datetime_values_keep_their_representation() -> None:
    converter = DocumentValueConverter()
    moment = datetime(2024, 5, 1, 12, 30)

    assert converter.representation_type_of(datetime) is datetime
    assert converter.to_stored_form(moment) == moment
    assert converter.to_stored_form(date(2024, 5, 1)) == datetime(2024, 5, 1)


def test_stored_form_applies_conversion_function() -> None:
    converter = DocumentValueConverter()

    assert converter.to_stored_form(Decimal("1.50")) == "1.50"
    assert converter.to_stored_form(PurePosixPath("/tmp/a")) == "/tmp/a"
    assert converter.to_stored_form(7) == 7


@pytest.mark.parametrize(
    ("representation", "expected"),
    [(EnumRepresentation.NAME, ["RED", "GREEN", "BLUE"]), ("value", ["r", "g", "b"])],
)
def test_enum_constants_follow_configured_representation(
    representation: EnumRepresentation | str, expected: list[str]
) -> None:
    converter = DocumentValueConverter(enum_representation=representation)

    assert [converter.to_stored_form(color) for color in Color] == expected


def test_enum_types_ignore_conversions_of_mixin_bases() -> None:
    converter = DocumentValueConverter([Conversion(int, str)])

    assert converter.representation_type_of(Priority) is Priority
    assert converter.to_stored_form(Priority.HIGH) == "HIGH"


def test_enum_specific_conversion_is_honoured() -> None:
    converter = DocumentValueConverter([Conversion(Color, int, lambda color: len(color.name))])

    assert converter.representation_type_of(Color) is int
    assert converter.to_stored_form(Color.GREEN) == 5


def test_custom_conversion_without_defaults() -> None:
    converter = DocumentValueConverter(
        [Conversion(Money, float, lambda money: float(money.amount))], include_defaults=False
    )

    assert converter.representation_type_of(Money) is float
    assert converter.representation_type_of(Decimal) is Decimal
    assert converter.to_stored_form(Money(amount=Decimal("2.5"), currency="EUR")) == 2.5


def test_unknown_enum_representation_is_rejected() -> None:
    with pytest.raises(ValueError):
        DocumentValueConverter(enum_representation="ordinal")
