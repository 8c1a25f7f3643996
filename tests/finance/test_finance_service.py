from __future__ import annotations

import csv
import io
import itertools
from datetime import datetime

import pandas as pd
import pytest

from src.laundry_zone.laundry_zone.core.enums import ReportType
from src.laundry_zone.laundry_zone.core.exceptions import NotFoundError, ValidationError
from src.laundry_zone.laundry_zone.finance.export import FIELDS, to_csv_bytes, to_xlsx_bytes
from src.laundry_zone.laundry_zone.finance.service import FinancialReportService


def test_create_then_get_keeps_amount_exact(store, fixed_now):
    finance = store.container.finance_service
    report = finance.create_report(type="income", amount=1234567.89, description=" Laundry kiloan ", date="2026-03-15")

    fetched = finance.get_report(report.id)
    assert fetched.amount == 1234567.89
    assert fetched.description == "Laundry kiloan"
    assert fetched.type is ReportType.INCOME
    assert fetched.created_at == fixed_now.isoformat()


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "refund", "amount": 100, "description": "x", "date": "2026-03-15"},
        {"type": "income", "amount": -5, "description": "x", "date": "2026-03-15"},
        {"type": "income", "amount": "abc", "description": "x", "date": "2026-03-15"},
        {"type": "income", "amount": 100, "description": "x", "date": "15/03/2026"},
        {"type": "income", "amount": 100, "description": "", "date": "2026-03-15"},
        {"type": None, "amount": 100, "description": "x", "date": "2026-03-15"},
    ],
)
def test_create_rejects_invalid_input(store, payload):
    with pytest.raises(ValidationError):
        store.container.finance_service.create_report(**payload)


def test_update_sets_updated_at_and_unknown_id_is_not_found(store):
    # First tick for the create, every later call sees the second.
    clock_values = itertools.chain([datetime(2026, 3, 1, 8, 0)], itertools.repeat(datetime(2026, 3, 2, 9, 0)))
    finance = FinancialReportService(store.reports, clock=lambda: next(clock_values))
    report = finance.create_report(type="expense", amount=50000, description="Deterjen", date="2026-03-01")

    updated = finance.update_report(report.id, type="expense", amount=65000, description="Deterjen", date="2026-03-01")

    assert updated.amount == 65000
    assert updated.updated_at == "2026-03-02T09:00:00"
    with pytest.raises(NotFoundError):
        finance.update_report("missing", type="expense", amount=1, description="x", date="2026-03-01")
    with pytest.raises(NotFoundError):
        finance.delete_report("missing")


def test_list_filters_by_type_and_summary_balances(store):
    store.reports.add(ReportType.INCOME, 300000.0, "2026-03-01")
    store.reports.add(ReportType.INCOME, 200000.0, "2026-02-01")
    store.reports.add(ReportType.EXPENSE, 150000.0, "2026-03-05")
    finance = store.container.finance_service

    assert len(finance.list_reports(type="expense")) == 1
    with pytest.raises(ValidationError):
        finance.list_reports(type="bonus")

    summary = finance.summary()
    assert (summary.count, summary.total_income, summary.total_expense, summary.balance) == (
        3, 500000.0, 150000.0, 350000.0,
    )


def test_csv_export_has_header_and_bom(store):
    store.reports.add(ReportType.INCOME, 300000.0, "2026-03-01", description="Kiloan, Maret")

    body = to_csv_bytes(store.container.finance_service.list_reports())

    assert body.startswith(b"\xef\xbb\xbf")
    rows = list(csv.DictReader(io.StringIO(body.decode("utf-8-sig"))))
    assert list(rows[0]) == FIELDS
    assert rows[0]["description"] == "Kiloan, Maret"
    assert rows[0]["type"] == "income"


def test_xlsx_export_reads_back_with_pandas(store):
    store.reports.add(ReportType.EXPENSE, 75000.0, "2026-03-03", description="Listrik")

    body = to_xlsx_bytes(store.container.finance_service.list_reports())
    df = pd.read_excel(io.BytesIO(body), engine="openpyxl")

    assert list(df.columns) == FIELDS
    assert df.loc[0, "amount"] == 75000.0
    assert df.loc[0, "description"] == "Listrik"
