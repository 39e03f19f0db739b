from __future__ import annotations

import pytest

from dsresolve.schemas.descriptors import RangePrice, SalePrice, StandardPrice, StartingAtPrice
from dsresolve.utils.pricing import format_amount, formatted_price, is_sale_price, original_price, price_prefix


def test_format_amount_hides_zero_cents() -> None:
    assert format_amount(129) == "$129"
    assert format_amount(129, 0) == "$129"
    assert format_amount(179, 99) == "$179.99"
    assert format_amount(5, 5) == "$5.05"


def test_sale_price() -> None:
    price = SalePrice(dollars=129, cents=0, original_dollars=179, original_cents=99)
    assert formatted_price(price) == "$129"
    assert original_price(price) == "$179.99"
    assert is_sale_price(price) is True


def test_standard_price() -> None:
    price = StandardPrice(dollars=149, cents=99)
    assert formatted_price(price) == "$149.99"
    assert original_price(price) is None
    assert price_prefix(price) is None
    assert is_sale_price(price) is False


def test_range_price() -> None:
    assert formatted_price(RangePrice(10, 0, 20, 0)) == "$10 - $20"


def test_starting_at_price() -> None:
    price = StartingAtPrice(49, 98)
    assert formatted_price(price) == "$49.98"
    assert price_prefix(price) == "From"


def test_invalid_amounts_rejected() -> None:
    with pytest.raises(ValueError):
        StandardPrice(10, 100)
    with pytest.raises(ValueError):
        SalePrice(-1, 0, 10, 0)


def test_unsupported_price_type() -> None:
    with pytest.raises(TypeError):
        formatted_price("$10")  # type: ignore[arg-type]
