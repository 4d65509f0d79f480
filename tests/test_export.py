"""Summary table and CSV / Excel export"""
from io import BytesIO, StringIO

import pandas as pd
from openpyxl import load_workbook

from config.default_params import NEW_STORE_FIELDS, EXISTING_STORE_FIELDS, RESULT_LABELS
from engine.models import StoreKind
from engine.store import CalculatorSession
from utils.export import build_summary_frame, summary_to_csv, summary_to_excel, SUMMARY_COLUMNS

def filled_session():
    session = CalculatorSession()
    for field, text in {
        "rent": "10000", "payment_terms_months": "2", "deposit": "20000",
        "renovation_and_ads": "50000", "equipment": "30000", "initial_materials": "5000",
        "monthly_labor": "15000", "monthly_utilities": "3000", "gross_margin_percent": "50",
    }.items():
        session.update_field(StoreKind.NEW, field, text)
    for field, text in {
        "daily_revenue": "2000", "daily_rent": "300", "daily_labor": "400",
        "daily_utilities": "200", "gross_margin_percent": "40",
    }.items():
        session.update_field(StoreKind.EXISTING, field, text)
    return session

def result_value(df, store, label):
    row = df[(df["Store"] == store) & (df["Item"] == label)]
    assert len(row) == 1, f"Missing row {store} / {label}"
    return row["Value"].iloc[0]

def test_summary_has_every_input_and_result():
    df = build_summary_frame(filled_session())
    assert list(df.columns) == SUMMARY_COLUMNS
    expected_rows = len(NEW_STORE_FIELDS) + 3 + len(EXISTING_STORE_FIELDS) + 4
    assert len(df) == expected_rows

def test_summary_values():
    df = build_summary_frame(filled_session())
    assert result_value(df, "New store", RESULT_LABELS["setup_cost"]["label"]) == 125_000.0
    assert result_value(df, "New store", RESULT_LABELS["daily_fixed_cost"]["label"]) == 933.33
    assert result_value(df, "New store", RESULT_LABELS["daily_break_even_revenue"]["label"]) == 1866.67
    # Loss survives the export with its sign
    assert result_value(df, "Existing store", RESULT_LABELS["net_profit_per_day"]["label"]) == -100.0

def test_empty_session_exports_zeros():
    df = build_summary_frame(CalculatorSession())
    assert (df["Value"] == 0).all()

def test_csv_round_trip():
    df = build_summary_frame(filled_session())
    back = pd.read_csv(StringIO(summary_to_csv(df).decode("utf-8")))
    assert list(back.columns) == SUMMARY_COLUMNS
    assert len(back) == len(df)

def test_excel_has_one_sheet_per_store():
    df = build_summary_frame(filled_session())
    wb = load_workbook(BytesIO(summary_to_excel(df)), data_only=True)
    assert wb.sheetnames == ["New store", "Existing store"]

    ws = wb["Existing store"]
    header = [c.value for c in ws[1]]
    assert header == ["Section", "Item", "Value"]
    rows = {ws.cell(r, 2).value: ws.cell(r, 3).value for r in range(2, ws.max_row + 1)}
    assert abs(rows[RESULT_LABELS["gross_profit_per_day"]["label"]] - 800.0) < 0.01
    assert abs(rows[RESULT_LABELS["fixed_cost_per_day"]["label"]] - 900.0) < 0.01
