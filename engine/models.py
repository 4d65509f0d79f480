from dataclasses import dataclass, fields
from enum import Enum


class StoreKind(str, Enum):
    NEW = "new_store"
    EXISTING = "existing_store"


@dataclass
class NewStoreInputs:
    # All values are raw text as typed; "" means not entered (treated as 0)
    rent: str = ""                  # per month
    payment_terms_months: str = ""  # months of rent paid upfront
    deposit: str = ""
    transfer_fee: str = ""
    franchise_fee: str = ""
    renovation_and_ads: str = ""
    equipment: str = ""
    initial_materials: str = ""
    monthly_labor: str = ""
    monthly_utilities: str = ""
    gross_margin_percent: str = ""  # 0-100


@dataclass
class ExistingStoreInputs:
    daily_revenue: str = ""
    daily_rent: str = ""
    daily_labor: str = ""
    daily_utilities: str = ""
    gross_margin_percent: str = ""  # 0-100


@dataclass(frozen=True)
class NewStoreMetrics:
    setup_cost: float = 0.0
    daily_fixed_cost: float = 0.0
    daily_break_even_revenue: float = 0.0


@dataclass(frozen=True)
class ExistingStoreMetrics:
    gross_profit_per_day: float = 0.0
    fixed_cost_per_day: float = 0.0
    break_even_revenue_per_day: float = 0.0
    net_profit_per_day: float = 0.0  # negative means the store runs at a loss


INPUT_TYPES = {
    StoreKind.NEW: NewStoreInputs,
    StoreKind.EXISTING: ExistingStoreInputs,
}


def field_names(kind: StoreKind):
    """Input field names for a store kind, in declaration order"""
    return [f.name for f in fields(INPUT_TYPES[StoreKind(kind)])]
