"""Tests for query parsing, search and pagination helpers"""

import pytest
from httpx import AsyncClient

from tests.conftest import API
from app.api.filters import page_count, parse_flag, tokenize
from app.models.blog import BlogPost
from app.models.menu import MenuItem


def test_tokenize_drops_stop_words_and_duplicates():
    assert tokenize("The Vanilla and the FUDGE vanilla") == ["vanilla", "fudge"]


def test_tokenize_ignores_punctuation():
    assert tokenize("mint-chip, 100%!") == ["mint", "chip", "100"]


def test_tokenize_only_stop_words():
    assert tokenize("the and of") == []


def test_parse_flag():
    assert parse_flag("true") is True
    assert parse_flag("false") is False
    assert parse_flag(None) is None


def test_page_count():
    assert page_count(0, 10) == 0
    assert page_count(10, 10) == 1
    assert page_count(11, 10) == 2


@pytest.mark.asyncio
async def test_search_without_tokens_matches_nothing(client: AsyncClient, menu_items):
    response = await client.get(f"{API}/menu", params={"search": "the and"})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(client: AsyncClient, menu_items):
    response = await client.get(f"{API}/menu", params={"search": "_"})

    assert response.json() == []


@pytest.mark.asyncio
async def test_flag_rejects_other_spellings(client: AsyncClient):
    for value in ("True", "1", "yes"):
        response = await client.get(f"{API}/menu", params={"special": value})
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "special"


@pytest.mark.asyncio
async def test_search_matches_words_after_punctuation(client: AsyncClient, test_db):
    test_db.add(MenuItem(
        name="Nutty Scoop",
        description="Vanilla ice-cream (nuts, almonds)",
        price=4.5,
        category="ice-cream",
    ))
    await test_db.commit()

    for search in ("cream", "nuts", "almonds"):
        response = await client.get(f"{API}/menu", params={"search": search})
        assert [item["name"] for item in response.json()] == ["Nutty Scoop"], search

    # Prefixes only count at the start of a word
    response = await client.get(f"{API}/menu", params={"search": "ream"})
    assert response.json() == []


@pytest.mark.asyncio
async def test_search_matches_words_after_line_break(client: AsyncClient, test_db):
    test_db.add(BlogPost(
        title="Season notes",
        content="Intro line.\nVanilla season starts",
        excerpt="Notes",
        author="Admin",
        category="news",
        published=True,
    ))
    await test_db.commit()

    response = await client.get(f"{API}/blog", params={"search": "vanilla"})

    assert [post["title"] for post in response.json()["posts"]] == ["Season notes"]
