"""Display formatting for calculator results."""


def format_amount(value):
    """Render a result with exactly two decimals, keeping its sign."""
    # + 0.0 turns -0.0 into 0.0
    return f"{float(value) + 0.0:.2f}"


def result_tone(value):
    """'positive' for zero or gains, 'negative' for losses."""
    return "positive" if value >= 0 else "negative"
