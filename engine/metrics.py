def margin_ratio(gross_margin_percent: float) -> float:
    """Gross margin percentage as a ratio (50 -> 0.5)"""
    return gross_margin_percent / 100.0

def break_even_revenue(fixed_cost: float, ratio: float) -> float:
    """Revenue at which gross profit covers fixed cost; 0 when there is no positive margin"""
    return fixed_cost / ratio if ratio > 0 else 0.0
