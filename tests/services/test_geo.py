# tests/services/test_geo.py
from nonna_kitchen.services.geo import (
    country_info,
    country_info_with_fallback,
    resolve_country,
    state_centre,
    sub_region_of,
)


def test_country_lookup_is_case_insensitive_and_knows_aliases() -> None:
    assert country_info("  ITALY ") is not None
    assert country_info("usa") == country_info("United States")
    assert country_info("Narnia") is None


def test_unknown_country_falls_back() -> None:
    info = country_info_with_fallback("Narnia")
    assert (info.code, info.name, info.continent, info.lat, info.lng) == (
        "XX",
        "Narnia",
        "Unknown",
        0.0,
        0.0,
    )


def test_resolve_country_accepts_codes() -> None:
    assert resolve_country("mx").name == "Mexico"
    assert resolve_country("Peru").code == "PE"
    assert resolve_country("QQ").code == "XX"


def test_sub_regions_and_state_centres() -> None:
    assert sub_region_of("Thailand") == "Southeast Asia"
    assert sub_region_of("Italy") is None
    assert state_centre("it", "Tuscany") == (43.4148, 11.2194)
    assert state_centre("IT", "Molise") is None
    assert state_centre("ZZ", "anywhere") is None
