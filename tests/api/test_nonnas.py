# tests/api/test_nonnas.py
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.models import Recipe
from tests.conftest import recipe_payload


def _add_recipe(
    db: Session, owner: Identity, *, published: bool = True, **fields: Any
) -> Recipe:
    row = Recipe(user_id=owner.id, published=published, **recipe_payload(**fields))
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def test_globe_counts_published_recipes_per_country(
    client: TestClient, db_session: Session, alice: Identity
) -> None:
    _add_recipe(db_session, alice, country="Italy")
    _add_recipe(db_session, alice, country="italy ", region="Lazio")
    _add_recipe(db_session, alice, country="Japan", region="Osaka")
    _add_recipe(db_session, alice, country="Atlantis")
    _add_recipe(db_session, alice, country="Italy", published=False)

    response = client.get("/api/v1/nonnas/globe")
    assert response.status_code == 200
    data = response.json()

    assert data["total_nonnas"] == 4
    by_name = {c["country_name"]: c for c in data["countries"]}
    assert by_name["Italy"]["nonna_count"] == 2
    assert by_name["Italy"]["id"] == "country-IT"
    assert by_name["Italy"]["continent"] == "Europe"
    assert by_name["Japan"]["region"] == "East Asia"
    assert by_name["Atlantis"]["country_code"] == "XX"
    assert by_name["Atlantis"]["continent"] == "Unknown"
    assert data["continent_summary"] == {"Europe": 2, "Asia": 1, "Unknown": 1}
    assert data["region_summary"] == {"East Asia": 1}
    assert data["countries"][0]["country_name"] == "Italy"


def test_globe_filters_by_continent_and_region(
    client: TestClient, db_session: Session, alice: Identity
) -> None:
    _add_recipe(db_session, alice, country="Italy")
    _add_recipe(db_session, alice, country="Japan")
    _add_recipe(db_session, alice, country="India")

    europe = client.get("/api/v1/nonnas/globe", params={"continent": "Europe"}).json()
    assert [c["country_name"] for c in europe["countries"]] == ["Italy"]

    south_asia = client.get("/api/v1/nonnas/globe", params={"region": "South Asia"}).json()
    assert [c["country_name"] for c in south_asia["countries"]] == ["India"]
    assert south_asia["total_nonnas"] == 1

    # A region takes precedence over the continent filter.
    both = client.get(
        "/api/v1/nonnas/globe", params={"region": "East Asia", "continent": "Europe"}
    ).json()
    assert [c["country_name"] for c in both["countries"]] == ["Japan"]


def test_globe_unpublished_visibility(
    client: TestClient,
    db_session: Session,
    alice: Identity,
    bob: Identity,
    bob_headers: dict[str, str],
    admin_headers: dict[str, str],
) -> None:
    _add_recipe(db_session, alice, country="Italy", published=False)
    _add_recipe(db_session, bob, country="Greece", published=False)

    anonymous = client.get("/api/v1/nonnas/globe", params={"published": "false"}).json()
    assert anonymous["total_nonnas"] == 0

    own = client.get(
        "/api/v1/nonnas/globe", params={"published": "false"}, headers=bob_headers
    ).json()
    assert [c["country_name"] for c in own["countries"]] == ["Greece"]

    everything = client.get(
        "/api/v1/nonnas/globe", params={"published": "false"}, headers=admin_headers
    ).json()
    assert everything["total_nonnas"] == 2


def test_country_groups_recipes_by_region(
    client: TestClient, db_session: Session, alice: Identity
) -> None:
    sicily = _add_recipe(db_session, alice, country="Italy", region="Sicily")
    _add_recipe(db_session, alice, country="Italy", region="sicily", first_name="Rosa")
    _add_recipe(db_session, alice, country="Italy", region="Molise")
    _add_recipe(db_session, alice, country="Italy", region=None)
    _add_recipe(db_session, alice, country="France", region="Provence")

    response = client.get("/api/v1/nonnas/country/it")
    assert response.status_code == 200
    data = response.json()

    assert data["country_code"] == "IT"
    assert data["country_name"] == "Italy"
    assert data["continent"] == "Europe"
    assert data["total_nonnas"] == 4

    states = {s["state_name"]: s for s in data["states"]}
    assert set(states) == {"Sicily", "sicily", "Molise", "Unknown Region"}
    assert states["Sicily"]["lat"] == 37.5999
    assert states["Sicily"]["nonnas"][0]["id"] == sicily.id
    assert states["Sicily"]["nonnas"][0]["name"] == "Nonna Maria Russo"
    # Regions without a known centre sit on the country centre.
    assert (states["Molise"]["lat"], states["Molise"]["lng"]) == (41.8719, 12.5674)
    assert states["Unknown Region"]["nonna_count"] == 1


def test_state_lists_recipe_details(
    client: TestClient, db_session: Session, alice: Identity
) -> None:
    match = _add_recipe(
        db_session, alice, country="Italy", region="Sicily", traditions="Feast of Saint Joseph"
    )
    _add_recipe(db_session, alice, country="Italy", region="Calabria")
    _add_recipe(db_session, alice, country="Italy", region=" ")

    response = client.get("/api/v1/nonnas/state", params={"country": "IT", "state": "SICILY"})
    assert response.status_code == 200
    data = response.json()
    assert data["country"] == "Italy"
    assert data["country_code"] == "IT"
    assert data["state"] == "SICILY"
    assert data["count"] == 1
    nonna = data["nonnas"][0]
    assert nonna["id"] == match.id
    assert nonna["history"] == "Made every Sunday in Catania."
    assert nonna["traditions"] == "Feast of Saint Joseph"

    unknown = client.get(
        "/api/v1/nonnas/state", params={"country": "Italy", "state": "Unknown Region"}
    ).json()
    assert unknown["count"] == 1


def test_state_requires_country_and_state(client: TestClient) -> None:
    response = client.get("/api/v1/nonnas/state", params={"country": "Italy"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Country and state parameters are required"
