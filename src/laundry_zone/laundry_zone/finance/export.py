"""Render financial reports as downloadable CSV or Excel files."""
from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from .model import FinancialReport

FIELDS = ["date", "type", "amount", "description", "id", "created_at", "updated_at"]


def _rows(reports: Sequence[FinancialReport]) -> list[dict]:
    rows = []
    for r in reports:
        data = r.to_dict()
        rows.append({k: data[k] for k in FIELDS})
    return rows


def to_csv_bytes(reports: Sequence[FinancialReport]) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=FIELDS)
    writer.writeheader()
    for row in _rows(reports):
        writer.writerow(row)
    # BOM so spreadsheet apps detect UTF-8.
    return out.getvalue().encode("utf-8-sig")


def to_xlsx_bytes(reports: Sequence[FinancialReport]) -> bytes:
    df = pd.DataFrame(_rows(reports), columns=FIELDS)
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Financial reports")
    return out.getvalue()
