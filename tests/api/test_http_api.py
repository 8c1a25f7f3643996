from __future__ import annotations

import pytest

from src.laundry_zone.laundry_zone.core.enums import ReportType


def test_index_banner(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"LaundryZone" in resp.data


def test_login_success_and_failure(client, admin):
    ok = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert ok.status_code == 200
    body = ok.get_json()
    assert body["user"]["role"] == "admin"

    me = client.get("/api/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert me.get_json()["username"] == "admin"

    bad = client.post("/api/login", json={"username": "admin", "password": "nope"})
    assert bad.status_code == 401
    assert bad.get_json() == {"error": "Invalid credentials"}

    missing = client.post("/api/login", json={"username": "admin"})
    assert missing.status_code == 400


def test_protected_route_without_token_is_401(client):
    resp = client.get("/api/statistics")
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Access token required"


def test_garbled_token_is_403(client):
    resp = client.get("/api/statistics", headers={"Authorization": "Bearer not.a.jwt"})
    assert resp.status_code == 403
    assert resp.get_json()["error"] == "Invalid token"


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/customers"),
        ("get", "/api/orders"),
        ("post", "/api/services"),
        ("get", "/api/employees"),
        ("get", "/api/debug/connection"),
    ],
)
def test_admin_routes_reject_customers(client, customer_headers, method, path):
    resp = getattr(client, method)(path, headers=customer_headers, json={})
    assert resp.status_code == 403
    assert resp.get_json()["error"] == "Admin access required"


def test_services_list_is_public(client, store):
    store.services.add(name="Reguler", price_per_kg=8000, estimated_hours=24)
    resp = client.get("/api/services")
    assert resp.status_code == 200
    assert resp.get_json()[0]["name"] == "Reguler"
    assert client.get("/api/services/summary").get_json()["count"] == 1


def test_place_order_over_http(client, store, admin_headers):
    service = store.services.add(name="Reguler", price_per_kg=8000, estimated_hours=24)

    resp = client.post(
        "/api/orders",
        headers=admin_headers,
        json={"customer_name": "Siti", "customer_phone": "0812", "service_id": service.id, "weight": 3.5},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["total_price"] == 28000
    assert body["service"] == "Reguler"

    orders = client.get("/api/orders", headers=admin_headers).get_json()
    assert orders[0]["id"] == body["order_id"]
    assert orders[0]["status"] == "processing"


def test_place_order_validation_and_not_found(client, admin_headers):
    zero = client.post(
        "/api/orders",
        headers=admin_headers,
        json={"customer_name": "Siti", "customer_phone": "0812", "service_id": "x", "weight": 0},
    )
    assert zero.status_code == 400

    unknown = client.post(
        "/api/orders",
        headers=admin_headers,
        json={
            "customer_name": "Siti",
            "customer_phone": "0812",
            "service_id": "00000000-0000-4000-8000-000000000000",
            "weight": 1,
        },
    )
    assert unknown.status_code == 404
    assert unknown.get_json() == {"error": "Service not found"}


def test_order_store_failure_is_system_error(client, store, admin_headers):
    service = store.services.add(name="Reguler", price_per_kg=8000, estimated_hours=24)
    store.orders.fail_writes = True

    resp = client.post(
        "/api/orders",
        headers=admin_headers,
        json={"customer_name": "Siti", "customer_phone": "0812", "service_id": service.id, "weight": 1},
    )

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "System error"
    assert "Deadlock" in resp.get_json()["details"]


def test_my_orders_only_lists_own_orders(client, store, customer, customer_headers):
    service = store.services.add(name="Reguler", price_per_kg=8000, estimated_hours=24)
    svc = store.container.order_service
    svc.place_order(customer_name="Budi", customer_phone=customer.phone, service_id=service.id, weight=1)
    svc.place_order(customer_name="Other", customer_phone="0899", service_id=service.id, weight=2)

    mine = client.get("/api/my-orders", headers=customer_headers).get_json()

    assert [o["customer_id"] for o in mine] == [customer.id]


def test_customer_crud_over_http(client, admin_headers):
    created = client.post("/api/customers", headers=admin_headers, json={"name": "Ani", "phone": "0811223344"})
    assert created.status_code == 200
    customer_id = created.get_json()["id"]
    assert created.get_json()["username"] == "ani223344"

    dup = client.post("/api/customers", headers=admin_headers, json={"name": "Ani", "phone": "0811223344"})
    assert dup.status_code == 400

    put = client.put(f"/api/customers/{customer_id}", headers=admin_headers, json={"name": "Ani B", "phone": "0811"})
    assert put.get_json() == {"success": True}

    missing = client.delete("/api/customers/does-not-exist", headers=admin_headers)
    assert missing.status_code == 404


def test_non_admin_can_create_financial_report(client, customer_headers):
    resp = client.post(
        "/api/financial-reports",
        headers=customer_headers,
        json={"type": "expense", "amount": 42000, "description": "Plastik", "date": "2026-03-10"},
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["amount"] == 42000

    fetched = client.get(f"/api/financial-reports/{body['id']}", headers=customer_headers).get_json()
    assert fetched["description"] == "Plastik"

    deleted = client.delete(f"/api/financial-reports/{body['id']}", headers=customer_headers)
    assert deleted.get_json()["id"] == body["id"]
    assert client.get(f"/api/financial-reports/{body['id']}", headers=customer_headers).status_code == 404


def test_financial_report_export(client, store, admin_headers):
    store.reports.add(ReportType.INCOME, 100000.0, "2026-03-01")

    csv_resp = client.get("/api/financial-reports/export?format=csv", headers=admin_headers)
    assert csv_resp.status_code == 200
    assert csv_resp.mimetype == "text/csv"
    assert "attachment" in csv_resp.headers["Content-Disposition"]

    xlsx_resp = client.get("/api/financial-reports/export?format=xlsx", headers=admin_headers)
    assert xlsx_resp.status_code == 200
    assert xlsx_resp.data[:2] == b"PK"

    bad = client.get("/api/financial-reports/export?format=pdf", headers=admin_headers)
    assert bad.status_code == 400


def test_statistics_endpoint(client, store, customer_headers):
    store.reports.add(ReportType.INCOME, 500.0, "2026-03-02")
    store.reports.add(ReportType.EXPENSE, 200.0, "2020-01-01")

    first = client.get("/api/statistics", headers=customer_headers)
    second = client.get("/api/statistics", headers=customer_headers)

    assert first.status_code == 200
    body = first.get_json()
    assert body == second.get_json()
    assert len(body["monthlyOrders"]) == 6
    assert body["monthlyRevenue"][-1] == {"month": "2026-03", "income": 500.0, "expense": 0}
    assert body["totals"]["net_profit"] == 300.0
    assert body["totals"]["total_customers"] == 1


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_wrong_method_is_json_405(client):
    resp = client.patch("/api/services")
    assert resp.status_code == 405
    assert "error" in resp.get_json()


@pytest.mark.parametrize(
    "path,body",
    [
        ("/api/orders", [1, 2]),
        ("/api/financial-reports", "x"),
        ("/api/customers", 42),
    ],
)
def test_non_object_json_body_is_invalid_input(client, admin_headers, path, body):
    resp = client.post(path, headers=admin_headers, json=body)

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Request body must be a JSON object"}


def test_login_with_list_body_is_invalid_input(client):
    resp = client.post("/api/login", json=["admin"])
    assert resp.status_code == 400


def test_missing_body_still_reports_missing_fields(client, admin_headers):
    resp = client.post("/api/services", headers=admin_headers)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Name is required"
