"""Summary table and downloads for the current calculator state."""

from dataclasses import asdict
from io import BytesIO

import pandas as pd

from config.default_params import NEW_STORE_FIELDS, EXISTING_STORE_FIELDS, RESULT_LABELS
from engine.models import StoreKind
from engine.parsing import numeric

SUMMARY_COLUMNS = ["Store", "Section", "Item", "Value"]

STORE_TITLES = {
    StoreKind.NEW.value: "New store",
    StoreKind.EXISTING.value: "Existing store",
}


def build_summary_frame(session):
    """One row per input and per derived metric for both stores."""
    rows = []
    metrics = session.metrics()
    for kind, field_defs in ((StoreKind.NEW, NEW_STORE_FIELDS), (StoreKind.EXISTING, EXISTING_STORE_FIELDS)):
        title = STORE_TITLES[kind.value]
        values = session.fields(kind)
        for f in field_defs:
            rows.append([title, "Input", f['label'], numeric(values[f['key']])])
        for key, value in asdict(metrics[kind.value]).items():
            rows.append([title, "Result", RESULT_LABELS[key]['label'], round(value, 2)])
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def summary_to_csv(df):
    return df.to_csv(index=False).encode("utf-8")


def summary_to_excel(df):
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="xlsxwriter") as xw:
        for title, part in df.groupby("Store", sort=False):
            part.drop(columns=["Store"]).to_excel(xw, index=False, sheet_name=title)
    bio.seek(0)
    return bio.read()
