"""Tests for MemoryStorage semantics."""

import pytest

from folio.storage import MemoryStorage
from folio.storage.base import PROFILE_ID

PROFILE = {
    "name": "N",
    "title": "T",
    "institution": "I",
    "bio": "B",
    "email": "e@x",
}


def _pub(title: str, year: int, **extra) -> dict:
    return {"title": title, "authors": "A", "venue": "V", "year": year, **extra}


@pytest.mark.asyncio
async def test_profile_absent_then_upserted_in_place():
    storage = MemoryStorage()
    assert await storage.get_profile() is None

    first = await storage.update_profile(dict(PROFILE, github_url="https://github.com/n"))
    second = await storage.update_profile(dict(PROFILE, name="Renamed"))

    assert second["id"] == first["id"] == PROFILE_ID
    assert second["name"] == "Renamed"
    # Full overwrite: omitted optional fields are cleared.
    assert second["github_url"] is None
    assert await storage.get_profile() == second


@pytest.mark.asyncio
async def test_publication_ids_unique_and_stable():
    storage = MemoryStorage()
    a = await storage.create_publication(_pub("a", 2020))
    b = await storage.create_publication(_pub("b", 2021))
    await storage.delete_publication(a["id"])
    c = await storage.create_publication(_pub("c", 2022))

    assert len({a["id"], b["id"], c["id"]}) == 3
    listed = {row["id"]: row for row in await storage.list_publications()}
    assert listed[b["id"]]["title"] == "b"


@pytest.mark.asyncio
async def test_publications_ordered_by_year_desc_ties_by_id():
    storage = MemoryStorage()
    first_2024 = await storage.create_publication(_pub("x", 2024))
    await storage.create_publication(_pub("y", 2022))
    second_2024 = await storage.create_publication(_pub("z", 2024))
    await storage.create_publication(_pub("w", 2023))

    rows = await storage.list_publications()
    assert [row["year"] for row in rows] == [2024, 2024, 2023, 2022]
    assert [rows[0]["id"], rows[1]["id"]] == [first_2024["id"], second_2024["id"]]


@pytest.mark.asyncio
async def test_publication_defaults_is_selected_false():
    storage = MemoryStorage()
    row = await storage.create_publication(_pub("a", 2020))
    assert row["is_selected"] is False
    assert row["abstract"] is None


@pytest.mark.asyncio
async def test_partial_update_leaves_other_fields():
    storage = MemoryStorage()
    row = await storage.create_publication(_pub("a", 2020, abstract="abs"))

    updated = await storage.update_publication(row["id"], {"venue": "ICML", "unknown": 1})

    assert updated["venue"] == "ICML"
    assert updated["abstract"] == "abs"
    assert "unknown" not in updated


@pytest.mark.asyncio
async def test_update_and_delete_missing_ids():
    storage = MemoryStorage()
    assert await storage.update_publication(99, {"title": "x"}) is None
    assert await storage.update_project(99, {"title": "x"}) is None
    assert await storage.delete_publication(99) is False
    assert await storage.delete_project(99) is False
    assert await storage.delete_news(99) is False


@pytest.mark.asyncio
async def test_deleted_publication_not_listed():
    storage = MemoryStorage()
    row = await storage.create_publication(_pub("a", 2020))
    assert await storage.delete_publication(row["id"]) is True
    assert row["id"] not in [r["id"] for r in await storage.list_publications()]


@pytest.mark.asyncio
async def test_news_ordered_by_date_desc():
    storage = MemoryStorage()
    for date in ("2023-05-01", "2024-01-15", "2023-12-31"):
        await storage.create_news({"date": date, "content": date})

    rows = await storage.list_news()
    assert [row["date"] for row in rows] == ["2024-01-15", "2023-12-31", "2023-05-01"]


@pytest.mark.asyncio
async def test_returned_rows_are_copies():
    storage = MemoryStorage()
    row = await storage.create_project({"title": "p", "description": "d"})
    row["title"] = "mutated"
    assert (await storage.list_projects())[0]["title"] == "p"
