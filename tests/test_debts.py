"""
Tests for debts and the reporting endpoints.

Debt recording:
- totalPrice = unit price * quantity (custom price or the menu item's price)
- the price is frozen at creation; menu price updates do not touch old debts
- validation: quantity, missing fields, debtor == creditor, unknown references

Reporting:
- pairwise summary (PUT /debts and GET /debts/summary), ordered pairs not netted
- dashboard stats: monthly total, per-user balances, top debtor / creditor
- individual ledger for one user
"""

from datetime import datetime, timedelta

from test_fixtures import (
    API,
    api_create_debt,
    api_create_user,
    api_seed_group,
)


EXAMPLE_DEBT_FLOW = """
Debt Flow
=========

1. RECORD DEBT
   POST /api/debts
   {"debtorId": 1, "creditorId": 2, "menuItemId": 3, "quantity": 2}

   Response: 201 Created
   {"id": 1, "debtorId": 1, "creditorId": 2, "menuItemId": 3, "quantity": 2,
    "totalPrice": 25.0, "date": "2026-10-16T12:00:00",
    "debtor": {...}, "creditor": {...}, "menuItem": {...}}

2. GROUP SUMMARY
   GET /api/debts/summary        (PUT /api/debts returns the same rows)
   [{"debtor": {...}, "creditor": {...}, "totalDebt": 150.0}, ...]

3. DASHBOARD
   GET /api/debts/stats
   {"monthlyTotal": 180.0, "groupTotal": 180.0, "userStats": [...],
    "topDebtor": {...}, "topCreditor": {...}}
"""


# =============================================================================
# CREATION
# =============================================================================


def test_create_debt_uses_menu_item_price(client):
    group = api_seed_group(client, price=12.5)

    r = api_create_debt(client, group.ana["id"], group.ben["id"], group.item["id"], quantity=2)

    assert r.status_code == 201
    debt = r.json()
    assert debt["totalPrice"] == 25.0
    assert debt["quantity"] == 2
    assert debt["debtor"]["name"] == "Ana"
    assert debt["creditor"]["name"] == "Ben"
    assert debt["menuItem"]["id"] == group.item["id"]
    assert debt["date"]


def test_create_debt_with_custom_price(client):
    group = api_seed_group(client, price=12.5)

    r = api_create_debt(
        client, group.ana["id"], group.ben["id"], group.item["id"], quantity=3, customPrice=4.2
    )

    assert r.status_code == 201
    assert r.json()["totalPrice"] == 12.6


def test_create_debt_with_zero_custom_price(client):
    group = api_seed_group(client, price=12.5)

    r = api_create_debt(
        client, group.ana["id"], group.ben["id"], group.item["id"], quantity=2, customPrice=0
    )

    assert r.status_code == 201
    assert r.json()["totalPrice"] == 0


def test_create_debt_rejects_non_positive_quantity(client):
    group = api_seed_group(client)

    for quantity in (0, -1):
        r = api_create_debt(
            client, group.ana["id"], group.ben["id"], group.item["id"], quantity=quantity
        )
        assert r.status_code == 400
        assert "quantity" in r.json()["error"]

    assert client.get(f"{API}/debts").json() == []


def test_create_debt_missing_fields(client):
    r = client.post(f"{API}/debts", json={"debtorId": 1, "quantity": 1})

    assert r.status_code == 400
    error = r.json()["error"]
    assert "creditorId" in error
    assert "menuItemId" in error
    assert client.get(f"{API}/debts").json() == []


def test_create_debt_debtor_equals_creditor(client):
    group = api_seed_group(client)

    r = api_create_debt(client, group.ana["id"], group.ana["id"], group.item["id"])

    assert r.status_code == 400
    assert r.json()["error"] == "Debtor and creditor can't be the same person"
    assert client.get(f"{API}/debts").json() == []


def test_create_debt_unknown_menu_item(client):
    group = api_seed_group(client)

    r = api_create_debt(client, group.ana["id"], group.ben["id"], 9999)

    assert r.status_code == 404
    assert r.json()["error"] == "Menu item not found"


def test_create_debt_unknown_user(client):
    group = api_seed_group(client)

    r = api_create_debt(client, group.ana["id"], 9999, group.item["id"])

    assert r.status_code == 404
    assert r.json()["error"] == "Creditor not found"


def test_create_debt_rejects_oversized_custom_price(client):
    group = api_seed_group(client)

    for custom_price in ("1e27", "12345678901", "4.205"):
        r = api_create_debt(
            client, group.ana["id"], group.ben["id"], group.item["id"], customPrice=custom_price
        )
        assert r.status_code == 400
        assert "customPrice" in r.json()["error"]

    assert client.get(f"{API}/debts").json() == []


def test_create_debt_rejects_oversized_quantity(client):
    group = api_seed_group(client)

    for quantity in (10**30, 10_001):
        r = api_create_debt(
            client, group.ana["id"], group.ben["id"], group.item["id"], quantity=quantity
        )
        assert r.status_code == 400
        assert "quantity" in r.json()["error"]

    assert client.get(f"{API}/debts").json() == []


def test_create_debt_total_must_fit_amount(client):
    group = api_seed_group(client, price="99999999.99")

    r = api_create_debt(client, group.ana["id"], group.ben["id"], group.item["id"], quantity=10_000)

    assert r.status_code == 400
    assert r.json()["details"] == {"field": "quantity"}
    assert client.get(f"{API}/debts").json() == []


def test_create_debt_quantity_must_be_an_integer(client):
    group = api_seed_group(client)

    for quantity in (True, 1.5, "2"):
        r = api_create_debt(
            client, group.ana["id"], group.ben["id"], group.item["id"], quantity=quantity
        )
        assert r.status_code == 400

    assert client.get(f"{API}/debts").json() == []


def test_price_update_does_not_change_existing_debts(client):
    group = api_seed_group(client, price=10)
    before = api_create_debt(client, group.ana["id"], group.ben["id"], group.item["id"], quantity=2)
    assert before.status_code == 201

    r = client.put(
        f"{API}/menu-items",
        json={
            "id": group.item["id"],
            "name": group.item["name"],
            "price": 15,
            "category": "food",
            "restaurantId": group.restaurant["id"],
        },
    )
    assert r.status_code == 200

    after = api_create_debt(client, group.ana["id"], group.ben["id"], group.item["id"], quantity=2)
    totals = {d["id"]: d["totalPrice"] for d in client.get(f"{API}/debts").json()}

    assert totals[before.json()["id"]] == 20.0
    assert totals[after.json()["id"]] == 30.0


# =============================================================================
# LISTING / DELETION
# =============================================================================


def test_list_debts_newest_first_and_idempotent(client):
    group = api_seed_group(client)
    older = api_create_debt(
        client,
        group.ana["id"],
        group.ben["id"],
        group.item["id"],
        date=(datetime.now() - timedelta(days=2)).isoformat(),
    ).json()
    newer = api_create_debt(client, group.ben["id"], group.ana["id"], group.item["id"]).json()

    first = client.get(f"{API}/debts")
    second = client.get(f"{API}/debts")

    assert first.status_code == 200
    assert [d["id"] for d in first.json()] == [newer["id"], older["id"]]
    assert first.json() == second.json()


def test_delete_debt(client):
    group = api_seed_group(client)
    debt = api_create_debt(client, group.ana["id"], group.ben["id"], group.item["id"]).json()

    r = client.delete(f"{API}/debts", params={"id": debt["id"]})
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert client.get(f"{API}/debts").json() == []

    # users can be removed once their debts are gone
    assert client.delete(f"{API}/users", params={"id": group.ana["id"]}).status_code == 200


def test_delete_debt_not_found_and_missing_id(client):
    assert client.delete(f"{API}/debts", params={"id": 42}).status_code == 404
    assert client.delete(f"{API}/debts").status_code == 400


# =============================================================================
# PAIRWISE SUMMARY
# =============================================================================


def _seed_spec_example(client):
    """Debts A->B 100, A->B 50, B->A 30 with a menu item priced 10"""
    group = api_seed_group(client, price=10)
    a, b, item = group.ana["id"], group.ben["id"], group.item["id"]
    assert api_create_debt(client, a, b, item, quantity=10).status_code == 201
    assert api_create_debt(client, a, b, item, quantity=5).status_code == 201
    assert api_create_debt(client, b, a, item, quantity=3).status_code == 201
    return group


def test_pair_summary_is_not_netted(client):
    group = _seed_spec_example(client)

    r = client.get(f"{API}/debts/summary")

    assert r.status_code == 200
    rows = {(s["debtor"]["id"], s["creditor"]["id"]): s["totalDebt"] for s in r.json()}
    assert rows == {
        (group.ana["id"], group.ben["id"]): 150.0,
        (group.ben["id"], group.ana["id"]): 30.0,
    }


def test_put_debts_returns_the_same_summary(client):
    _seed_spec_example(client)

    legacy = client.put(f"{API}/debts")

    assert legacy.status_code == 200
    assert legacy.json() == client.get(f"{API}/debts/summary").json()
    # still a read: nothing was written
    assert len(client.get(f"{API}/debts").json()) == 3


def test_pair_summary_empty(client):
    assert client.get(f"{API}/debts/summary").json() == []


# =============================================================================
# DASHBOARD / INDIVIDUAL LEDGER
# =============================================================================


def test_stats_per_user_balances(client):
    group = _seed_spec_example(client)

    r = client.get(f"{API}/debts/stats")

    assert r.status_code == 200
    body = r.json()
    stats = {s["userId"]: s for s in body["userStats"]}
    ana, ben = stats[group.ana["id"]], stats[group.ben["id"]]
    assert (ana["totalOwing"], ana["totalOwed"], ana["netBalance"]) == (150.0, 30.0, -120.0)
    assert (ben["totalOwing"], ben["totalOwed"], ben["netBalance"]) == (30.0, 150.0, 120.0)
    assert body["topDebtor"]["userName"] == "Ana"
    assert body["topCreditor"]["userName"] == "Ben"
    assert body["groupTotal"] == 180.0
    assert body["monthlyTotal"] == 180.0


def test_stats_monthly_total_excludes_other_months(client):
    group = api_seed_group(client, price=10)
    last_month = datetime.now().replace(day=1) - timedelta(days=1)
    api_create_debt(client, group.ana["id"], group.ben["id"], group.item["id"], quantity=2)
    api_create_debt(
        client,
        group.ana["id"],
        group.ben["id"],
        group.item["id"],
        quantity=50,
        date=last_month.isoformat(),
    )

    body = client.get(f"{API}/debts/stats").json()

    assert body["monthlyTotal"] == 20.0
    assert body["groupTotal"] == 520.0


def test_stats_without_debts(client):
    api_create_user(client)

    body = client.get(f"{API}/debts/stats").json()

    assert body["userStats"] == []
    assert body["topDebtor"] is None
    assert body["topCreditor"] is None
    assert body["monthlyTotal"] == 0


def test_individual_ledger(client):
    group = _seed_spec_example(client)

    r = client.get(f"{API}/debts/individual", params={"userId": group.ana["id"]})

    assert r.status_code == 200
    ledger = r.json()
    assert ledger["user"]["name"] == "Ana"
    assert len(ledger["debtsOwed"]) == 2
    assert len(ledger["debtsToCollect"]) == 1
    assert ledger["totalOwed"] == 150.0
    assert ledger["totalToCollect"] == 30.0
    assert ledger["netBalance"] == -120.0


def test_individual_ledger_errors(client):
    assert client.get(f"{API}/debts/individual").status_code == 400
    assert client.get(f"{API}/debts/individual", params={"userId": 31337}).status_code == 404
