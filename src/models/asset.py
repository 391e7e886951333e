from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class AssetCategory(Enum):
    REAL_ESTATE = "real_estate"
    VEHICLE = "vehicle"
    SAVINGS = "savings"
    INVESTMENT = "investment"
    OTHER_ASSET = "other_asset"


@dataclass(frozen=True)
class Asset:
    id: str
    name: str
    category: AssetCategory
    current_value: Decimal
    purchase_value: Decimal | None = None
    purchase_date: date | None = None
    description: str | None = None
    memo: str | None = None
    created_at: str | None = None
