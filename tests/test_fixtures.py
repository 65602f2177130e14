"""
Shared test helpers for the TabSplit test suite.

Two kinds of helpers live here:
- ``make_*`` build lightweight stand-ins (SimpleNamespace) for the pure
  aggregation functions, no database involved.
- ``api_*`` create real records through the HTTP API and return the JSON body.
"""

import uuid
from types import SimpleNamespace
from datetime import datetime
from decimal import Decimal

API = "/api"

# Realistic default group members
REALISTIC_USERS = {
    "default": {"name": "Sarah Martinez", "email_prefix": "sarah.martinez"},
    "friend": {"name": "Michael Chen", "email_prefix": "michael.chen"},
    "casual": {"name": "Emma Johnson", "email_prefix": "emma.johnson"},
}


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4().hex[:12]}@example.com"


# =============================================================================
# In-memory stand-ins
# =============================================================================


def make_user(user_id: int, name: str = None):
    """Mock user with the attributes the aggregation functions read"""
    return SimpleNamespace(id=user_id, name=name or f"User {user_id}")


def make_debt(debtor, creditor, total_price, date=None, debt_id=None):
    """
    Mock debt between two ``make_user`` users.

    Example:
        >>> a, b = make_user(1, "Ana"), make_user(2, "Ben")
        >>> make_debt(a, b, "12.50").total_price
        Decimal('12.50')
    """
    return SimpleNamespace(
        id=debt_id,
        debtor=debtor,
        creditor=creditor,
        debtor_id=debtor.id,
        creditor_id=creditor.id,
        total_price=Decimal(str(total_price)),
        date=date or datetime.now(),
    )


# =============================================================================
# API helpers
# =============================================================================


def api_create_user(client, profile_type: str = "default", name: str = None) -> dict:
    profile = REALISTIC_USERS.get(profile_type, REALISTIC_USERS["default"])
    r = client.post(
        f"{API}/users",
        json={
            "name": name or profile["name"],
            "email": unique_email(profile["email_prefix"]),
        },
    )
    assert r.status_code == 201, r.text
    return r.json()


def api_create_restaurant(client, name: str = "Trattoria Roma") -> dict:
    r = client.post(f"{API}/restaurants", json={"name": name})
    assert r.status_code == 201, r.text
    return r.json()


def api_create_menu_item(
    client, restaurant_id: int, name: str = "Margherita", price=10, category="food"
) -> dict:
    r = client.post(
        f"{API}/menu-items",
        json={
            "name": name,
            "price": price,
            "category": category,
            "restaurantId": restaurant_id,
        },
    )
    assert r.status_code == 201, r.text
    return r.json()


def api_create_debt(client, debtor_id, creditor_id, menu_item_id, quantity=1, **extra):
    payload = {
        "debtorId": debtor_id,
        "creditorId": creditor_id,
        "menuItemId": menu_item_id,
        "quantity": quantity,
    }
    payload.update(extra)
    return client.post(f"{API}/debts", json=payload)


def api_seed_group(client, price=10) -> SimpleNamespace:
    """Two users, one restaurant and one menu item priced ``price``"""
    ana = api_create_user(client, name="Ana")
    ben = api_create_user(client, "friend", name="Ben")
    restaurant = api_create_restaurant(client)
    item = api_create_menu_item(client, restaurant["id"], price=price)
    return SimpleNamespace(ana=ana, ben=ben, restaurant=restaurant, item=item)
