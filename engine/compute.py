from config.default_params import DAYS_PER_MONTH
from .models import (
    NewStoreInputs, ExistingStoreInputs, NewStoreMetrics, ExistingStoreMetrics, StoreKind
)
from .parsing import numeric
from .metrics import margin_ratio, break_even_revenue

def setup_cost_components(inputs: NewStoreInputs):
    """
    One-off outlays needed to open a new store

    Rent paid upfront (rent × months) is an opening cash outlay, separate
    from the monthly rent used for the fixed-cost line.
    """
    return {
        "advance_rent": numeric(inputs.rent) * numeric(inputs.payment_terms_months),
        "deposit": numeric(inputs.deposit),
        "transfer_fee": numeric(inputs.transfer_fee),
        "franchise_fee": numeric(inputs.franchise_fee),
        "renovation_and_ads": numeric(inputs.renovation_and_ads),
        "equipment": numeric(inputs.equipment),
        "initial_materials": numeric(inputs.initial_materials),
    }

def compute_new_store(inputs: NewStoreInputs) -> NewStoreMetrics:
    """Setup cost, daily fixed cost and daily break-even revenue for a new store"""
    setup_cost = sum(setup_cost_components(inputs).values())

    monthly_fixed = (
        numeric(inputs.rent) +
        numeric(inputs.monthly_labor) +
        numeric(inputs.monthly_utilities)
    )
    daily_fixed = monthly_fixed / DAYS_PER_MONTH

    ratio = margin_ratio(numeric(inputs.gross_margin_percent))

    return NewStoreMetrics(
        setup_cost=setup_cost,
        daily_fixed_cost=daily_fixed,
        daily_break_even_revenue=break_even_revenue(daily_fixed, ratio),
    )

def compute_existing_store(inputs: ExistingStoreInputs) -> ExistingStoreMetrics:
    """Daily gross profit, fixed cost, break-even and net profit for a running store"""
    ratio = margin_ratio(numeric(inputs.gross_margin_percent))

    fixed_cost = (
        numeric(inputs.daily_rent) +
        numeric(inputs.daily_labor) +
        numeric(inputs.daily_utilities)
    )
    gross_profit = numeric(inputs.daily_revenue) * ratio

    # Net profit keeps its sign: a negative value is a daily loss
    return ExistingStoreMetrics(
        gross_profit_per_day=gross_profit,
        fixed_cost_per_day=fixed_cost,
        break_even_revenue_per_day=break_even_revenue(fixed_cost, ratio),
        net_profit_per_day=gross_profit - fixed_cost,
    )

def compute(new_store: NewStoreInputs, existing_store: ExistingStoreInputs):
    """
    Compute every derived metric from the current inputs

    Args:
        new_store: Inputs for the new-store plan
        existing_store: Inputs for the running store

    Returns:
        Dict keyed by StoreKind value with the metrics record for each store
    """
    return {
        StoreKind.NEW.value: compute_new_store(new_store),
        StoreKind.EXISTING.value: compute_existing_store(existing_store),
    }
