import pytest

from typing import Optional, Union

from cooklang_recipe.recipe import ParsedQuantity

from cooklang_recipe.quantity_parser import parse_quantity, parse_units, number


class TestParseQuantity:
    @pytest.mark.parametrize(
        "value, exp",
        [
            # Integers
            ("0", ParsedQuantity(0, False)),
            ("123", ParsedQuantity(123, False)),
            # Surrounding whitespace is ignored
            ("  3 ", ParsedQuantity(3, False)),
            # Floats
            ("0.", ParsedQuantity(0.0, False)),
            ("16.25", ParsedQuantity(16.25, False)),
            (".5", ParsedQuantity(0.5, False)),
            # Fractions
            ("1/2", ParsedQuantity(0.5, True)),
            ("3/4", ParsedQuantity(0.75, True)),
            ("1.5/3", ParsedQuantity(0.5, True)),
            # Mixed fractions
            ("1 1/2", ParsedQuantity(1.5, True)),
            ("10 1/4", ParsedQuantity(10.25, True)),
            ("2\t1/2", ParsedQuantity(2.5, True)),
        ],
    )
    def test_numbers(self, value: str, exp: ParsedQuantity) -> None:
        quantity = parse_quantity(value)
        assert quantity == exp
        assert type(quantity.value) is type(exp.value)

    @pytest.mark.parametrize("numerator", [1, 2, 3, 7])
    @pytest.mark.parametrize("denominator", [2, 3, 8, 9])
    def test_fractions(self, numerator: int, denominator: int) -> None:
        quantity = parse_quantity(f"{numerator}/{denominator}")
        assert quantity.value == numerator / denominator
        assert quantity.was_fraction is True

    @pytest.mark.parametrize("value", [None, "", "   ", "\t"])
    def test_missing(self, value: Optional[str]) -> None:
        assert parse_quantity(value) == ParsedQuantity(None, False)

    @pytest.mark.parametrize(
        "value, exp",
        [
            # Text
            ("a pinch", "a pinch"),
            ("  a lot ", "a lot"),
            ("½", "½"),
            # Signs are not numeric characters
            ("-1", "-1"),
            ("-0 1/2", "-0 1/2"),
            # Numeric-looking but malformed
            ("1/0", "1/0"),
            ("0 1/0", "0 1/0"),
            ("1.2.3", "1.2.3"),
            ("1 2", "1 2"),
            ("1 1/2 3", "1 1/2 3"),
            ("1/2/3", "1/2/3"),
            ("1/", "1/"),
            ("/2", "/2"),
            ("5%", "5%"),
            (".", "."),
            # Too large to represent as a float
            ("1" * 400 + "/3", "1" * 400 + "/3"),
            ("1" * 400 + " 1/2", "1" * 400 + " 1/2"),
        ],
    )
    def test_text(self, value: str, exp: str) -> None:
        assert parse_quantity(value) == ParsedQuantity(exp, False)


@pytest.mark.parametrize(
    "value, exp",
    [
        (None, None),
        ("", None),
        ("  ", None),
        ("tsp", "tsp"),
        (" fl oz ", "fl oz"),
    ],
)
def test_parse_units(value: Optional[str], exp: Optional[str]) -> None:
    assert parse_units(value) == exp


class TestNumber:
    @pytest.mark.parametrize(
        "value, exp",
        [
            ("2", 2),
            ("1.5", 1.5),
            ("1/4", 0.25),
            ("1 1/2", 1.5),
        ],
    )
    def test_valid(self, value: str, exp: Union[int, float]) -> None:
        assert number(value) == exp

    @pytest.mark.parametrize("value", ["", "a pinch", "1/0", "-1"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ValueError):
            number(value)
