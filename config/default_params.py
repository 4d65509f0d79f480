"""Default parameters and field definitions for the investment calculator."""

DAYS_PER_MONTH = 30

CURRENCY_SYMBOL = "¥"
PERCENT_SYMBOL = "%"

LOG_LEVEL = "INFO"

# Accepted input range: 0, or MIN_POSITIVE_INPUT..MAX_INPUT.
# Keeps every product and margin division finite.
MIN_POSITIVE_INPUT = 1e-9
MAX_INPUT = 1e12

# New store inputs, in display order.
# panel: "setup" feeds the setup-cost panel, "break_even" the break-even panel.
# Rent is entered once on the setup panel and used by both.
NEW_STORE_FIELDS = [
    {'key': 'rent', 'label': 'Rent (per month)', 'prefix': CURRENCY_SYMBOL, 'required': True, 'panel': 'setup'},
    {'key': 'payment_terms_months', 'label': 'Rent paid upfront (months)', 'prefix': '', 'required': True, 'panel': 'setup'},
    {'key': 'deposit', 'label': 'Deposit', 'prefix': CURRENCY_SYMBOL, 'required': False, 'panel': 'setup'},
    {'key': 'transfer_fee', 'label': 'Transfer / agency fee', 'prefix': CURRENCY_SYMBOL, 'required': False, 'panel': 'setup'},
    {'key': 'franchise_fee', 'label': 'Franchise / training fee', 'prefix': CURRENCY_SYMBOL, 'required': False, 'panel': 'setup'},
    {'key': 'renovation_and_ads', 'label': 'Renovation + advertising', 'prefix': CURRENCY_SYMBOL, 'required': False, 'panel': 'setup'},
    {'key': 'equipment', 'label': 'Equipment', 'prefix': CURRENCY_SYMBOL, 'required': False, 'panel': 'setup'},
    {'key': 'initial_materials', 'label': 'Initial materials', 'prefix': CURRENCY_SYMBOL, 'required': False, 'panel': 'setup'},
    {'key': 'monthly_labor', 'label': 'Labor (per month)', 'prefix': CURRENCY_SYMBOL, 'required': True, 'panel': 'break_even'},
    {'key': 'monthly_utilities', 'label': 'Utilities & sundries (per month)', 'prefix': CURRENCY_SYMBOL, 'required': True, 'panel': 'break_even'},
    {'key': 'gross_margin_percent', 'label': 'Expected gross margin', 'prefix': PERCENT_SYMBOL, 'required': True, 'panel': 'break_even'},
]

EXISTING_STORE_FIELDS = [
    {'key': 'daily_revenue', 'label': 'Revenue / day', 'prefix': CURRENCY_SYMBOL, 'required': True, 'panel': 'existing'},
    {'key': 'daily_rent', 'label': 'Rent / day', 'prefix': CURRENCY_SYMBOL, 'required': True, 'panel': 'existing'},
    {'key': 'daily_labor', 'label': 'Labor / day', 'prefix': CURRENCY_SYMBOL, 'required': True, 'panel': 'existing'},
    {'key': 'daily_utilities', 'label': 'Utilities & sundries / day', 'prefix': CURRENCY_SYMBOL, 'required': True, 'panel': 'existing'},
    {'key': 'gross_margin_percent', 'label': 'Actual gross margin', 'prefix': PERCENT_SYMBOL, 'required': True, 'panel': 'existing'},
]

# Result labels and the formula caption shown under each value
RESULT_LABELS = {
    'setup_cost': {'label': 'Total setup cost', 'caption': 'rent × months paid upfront + one-off fees'},
    'daily_fixed_cost': {'label': 'Daily fixed cost', 'caption': '(rent + labor + utilities) / 30'},
    'daily_break_even_revenue': {'label': 'Daily break-even revenue', 'caption': 'fixed cost ÷ gross margin'},
    'gross_profit_per_day': {'label': 'Gross profit (day)', 'caption': None},
    'fixed_cost_per_day': {'label': 'Fixed cost (day)', 'caption': None},
    'break_even_revenue_per_day': {'label': 'Break-even revenue (day)', 'caption': 'fixed cost ÷ gross margin'},
    'net_profit_per_day': {'label': 'Net profit (day)', 'caption': 'gross profit − fixed cost'},
}

# Setup cost components as charted and exported
SETUP_COST_LABELS = {
    'advance_rent': 'Advance rent',
    'deposit': 'Deposit',
    'transfer_fee': 'Transfer / agency fee',
    'franchise_fee': 'Franchise / training fee',
    'renovation_and_ads': 'Renovation + advertising',
    'equipment': 'Equipment',
    'initial_materials': 'Initial materials',
}
