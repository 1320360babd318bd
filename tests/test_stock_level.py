# tests/test_stock_level.py
import pytest

from pantry_service.app.enum.inventory_enum import StockLevel
from pantry_service.app.util.stock_level import calculate_stock_level, stock_level_label


@pytest.mark.parametrize("min_stock_level", [0, 0.1, 1.0, 250])
def test_zero_quantity_is_out(min_stock_level):
    assert calculate_stock_level(0, min_stock_level) == StockLevel.out


@pytest.mark.parametrize("quantity", [0.001, 1, 42.5])
def test_zero_threshold_is_high(quantity):
    assert calculate_stock_level(quantity, 0) == StockLevel.high


@pytest.mark.parametrize(
    "quantity, min_stock_level, expected",
    [
        (0.4, 1.0, StockLevel.low),
        (0.5, 1.0, StockLevel.low),
        (0.51, 1.0, StockLevel.medium),
        (1.0, 1.0, StockLevel.medium),
        (1.5, 1.0, StockLevel.high),
        (2.0, 1.0, StockLevel.high),
        (0.2, 0.1, StockLevel.high),
        (0.5, 0.5, StockLevel.medium),
    ],
)
def test_thresholds(quantity, min_stock_level, expected):
    assert calculate_stock_level(quantity, min_stock_level) == expected


def test_classification_is_pure():
    results = {calculate_stock_level(0.75, 1.0) for _ in range(5)}
    assert results == {StockLevel.medium}


def test_display_label_uses_same_levels():
    assert stock_level_label(calculate_stock_level(0, 1)) == "Out of Stock"
    assert stock_level_label(calculate_stock_level(0.3, 1)) == "Low Stock"
    assert stock_level_label(calculate_stock_level(1, 1)) == "Medium Stock"
    assert stock_level_label("high") == "In Stock"
    assert stock_level_label("bogus") == "Unknown"
