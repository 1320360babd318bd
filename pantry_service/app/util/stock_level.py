from ..enum.inventory_enum import StockLevel

LOW_STOCK_RATIO = 0.5

STOCK_LEVEL_LABELS = {
    StockLevel.high: "In Stock",
    StockLevel.medium: "Medium Stock",
    StockLevel.low: "Low Stock",
    StockLevel.out: "Out of Stock",
}


def calculate_stock_level(quantity: float, min_stock_level: float) -> StockLevel:
    """Classify a quantity against its reorder threshold.

    This is the only place stock levels are derived; item writes, stock
    adjustments and display labels all go through it.
    """
    if quantity == 0:
        return StockLevel.out
    if quantity <= min_stock_level * LOW_STOCK_RATIO:
        return StockLevel.low
    if quantity <= min_stock_level:
        return StockLevel.medium
    return StockLevel.high


def stock_level_label(stock_level) -> str:
    try:
        return STOCK_LEVEL_LABELS[StockLevel(stock_level)]
    except ValueError:
        return "Unknown"
