"""Parsing of raw field text into numbers"""
import math
import re

from config.default_params import MIN_POSITIVE_INPUT, MAX_INPUT

# Plain decimal notation with optional sign and exponent ("12", "12.", ".5", "1e3")
_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_number(raw_text: str):
    """
    Parse field text as a float.

    Returns None when the text is empty, not a number, or not finite.
    """
    if raw_text is None:
        return None
    text = str(raw_text).strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value + 0.0  # folds -0.0 into 0.0


def numeric(raw_text: str) -> float:
    """Numeric value of a field: empty or unparseable text counts as 0"""
    value = parse_number(raw_text)
    return 0.0 if value is None else value


def is_acceptable(raw_text: str) -> bool:
    """
    True when text may be stored: empty, zero, or a number between
    MIN_POSITIVE_INPUT and MAX_INPUT.
    """
    if raw_text == "":
        return True
    value = parse_number(raw_text)
    if value is None:
        return False
    return value == 0 or MIN_POSITIVE_INPUT <= value <= MAX_INPUT
