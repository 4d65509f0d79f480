"""Field text parsing"""
import math
import pytest

from engine.parsing import parse_number, numeric, is_acceptable

@pytest.mark.parametrize("text,expected", [
    ("0", 0.0),
    ("500", 500.0),
    ("12.", 12.0),
    (".5", 0.5),
    ("1e3", 1000.0),
    (" 42 ", 42.0),
    ("-3.5", -3.5),
])
def test_parse_number_values(text, expected):
    assert abs(parse_number(text) - expected) < 1e-12

@pytest.mark.parametrize("text", ["", "abc", "1,000", "1_000", "12.3.4", ".", "-", "inf", "nan", "1e999"])
def test_parse_number_rejects(text):
    assert parse_number(text) is None

def test_numeric_defaults_to_zero():
    """Empty and unparseable text read as 0 and never raise"""
    assert numeric("") == 0.0
    assert numeric("abc") == 0.0
    assert numeric(None) == 0.0
    assert numeric("7.25") == 7.25

def test_negative_zero_is_folded():
    value = numeric("-0")
    assert value == 0.0
    assert math.copysign(1.0, value) == 1.0

@pytest.mark.parametrize("text", ["", "0", "12.", "500", "0.75", "-0"])
def test_acceptable_text(text):
    assert is_acceptable(text)

@pytest.mark.parametrize("text", ["-1", "-0.01", "abc", " ", "inf", "1e999", None])
def test_unacceptable_text(text):
    assert not is_acceptable(text)

@pytest.mark.parametrize("text", ["1e-310", "1e-10", "1e13", "1e200", "1000000000001"])
def test_out_of_range_text_rejected(text):
    """Magnitudes outside the accepted range would let products or divisions overflow"""
    assert not is_acceptable(text)

@pytest.mark.parametrize("text", ["1e-9", "0.000000001", "1e12", "1000000000000", "0.0"])
def test_range_bounds_accepted(text):
    assert is_acceptable(text)
