from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from api.domain.entities import EntityDraft
from api.repositories.sql_repository import EntityRepository
from api.services.errors import StoreError
from api.domain.entities import like_pattern
from api.services.lookup_service import LookupService


@pytest.fixture()
def seeded(temp_db):
    EntityRepository().save_all(
        [
            EntityDraft(number_value=1, name="Alpha"),
            EntityDraft(number_value=2, name="beta"),
            EntityDraft(number_value=3, name="ALPHABET"),
            EntityDraft(number_value=4, name=None),
        ]
    )
    return LookupService()


def _names(rows) -> set:
    return {r.name for r in rows}


def test_like_pattern_escapes_wildcards():
    assert like_pattern("AbC") == "%AbC%"
    assert like_pattern("50%_off/") == "%50/%/_off//%"
    assert like_pattern(None) == "%%"


def test_find_all_both_styles_agree(seeded):
    repo_rows = seeded.find_all()
    session_rows = seeded.find_all_via_session()
    assert len(repo_rows) == 4
    assert [(r.id, r.number_value, r.name) for r in repo_rows] == [
        (r.id, r.number_value, r.name) for r in session_rows
    ]


def test_find_all_is_repeatable(seeded):
    first = sorted((r.id, r.number_value, r.name or "") for r in seeded.find_all())
    second = sorted((r.id, r.number_value, r.name or "") for r in seeded.find_all())
    assert first == second


@pytest.mark.parametrize("method", ["find_by_name_contains", "find_by_name_contains_via_session"])
def test_search_is_case_insensitive(seeded, method):
    search = getattr(seeded, method)
    assert _names(search("alpha")) == {"Alpha", "ALPHABET"}
    assert _names(search("BET")) == {"beta", "ALPHABET"}
    assert search("gamma") == []


def test_session_search_matches_percent_literally(temp_db):
    EntityRepository().save_all(
        [EntityDraft(number_value=1, name="100% cotton"), EntityDraft(number_value=2, name="1000 cotton")]
    )
    svc = LookupService()
    assert _names(svc.find_by_name_contains_via_session("0%")) == {"100% cotton"}


def test_empty_store_returns_empty_lists(temp_db):
    svc = LookupService()
    assert svc.find_all() == []
    assert svc.find_all_via_session() == []
    assert svc.find_by_name_contains_via_session("x") == []


def test_store_failure_becomes_store_error():
    class BrokenRepository(EntityRepository):
        def query(self, *criteria):
            raise OperationalError("SELECT", {}, Exception("connection refused"))

    svc = LookupService(repository=BrokenRepository())
    with pytest.raises(StoreError):
        svc.find_all()
    with pytest.raises(StoreError):
        svc.find_by_name_contains("a")


def test_session_style_without_schema_raises_store_error(temp_db):
    from api.db import models, session as db_session

    models.Base.metadata.drop_all(bind=db_session.get_engine())
    with pytest.raises(StoreError):
        LookupService().find_all_via_session()


@pytest.mark.parametrize("method", ["find_by_name_contains", "find_by_name_contains_via_session"])
def test_search_finds_non_ascii_name_by_exact_fragment(temp_db, method):
    EntityRepository().save_all(
        [EntityDraft(number_value=1, name="Ärger"), EntityDraft(number_value=2, name="Arger")]
    )
    search = getattr(LookupService(), method)
    assert [r.name for r in search("Ärger")] == ["Ärger"]
    assert [r.name for r in search("rger")] == ["Ärger", "Arger"]


@pytest.mark.parametrize("method", ["find_by_name_contains", "find_by_name_contains_via_session"])
def test_search_matches_escape_character_literally(temp_db, method):
    EntityRepository().save_all(
        [EntityDraft(number_value=1, name="a/b"), EntityDraft(number_value=2, name="ab")]
    )
    search = getattr(LookupService(), method)
    assert [r.name for r in search("a/b")] == ["a/b"]
