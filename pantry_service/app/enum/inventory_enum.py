from enum import Enum


class ItemCategory(str, Enum):
    dal = "dal"
    rice = "rice"
    spices = "spices"
    oil = "oil"
    vegetables = "vegetables"
    fruits = "fruits"
    dairy = "dairy"
    snacks = "snacks"
    condiments = "condiments"
    soap = "soap"
    cleaning = "cleaning"
    others = "others"


class ItemUnit(str, Enum):
    kg = "kg"
    gram = "gram"
    liter = "liter"
    ml = "ml"
    piece = "piece"
    packet = "packet"
    bottle = "bottle"


class StockLevel(str, Enum):
    out = "out"
    low = "low"
    medium = "medium"
    high = "high"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"
