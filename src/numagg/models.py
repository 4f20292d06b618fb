# value objects for catalog records and reducer output, kept explicit and reusable across the app

from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class Price:
    amount: float
    currency: str

@dataclass(frozen=True)
class Laptop:
    # immutable view of one record from the catalog's "laptops" array
    name: str
    price: Price
    only_has_usb_type_c: bool
    built_in_apps: Tuple[str, ...]

@dataclass(frozen=True)
class SeriesSummary:
    # output value object used by consumers and cli
    name: str
    average: float
    biggest: float
