from __future__ import annotations

from datetime import date

import pytest

from prox.core.drafts import (
    Draft,
    empty_draft,
    is_saveable,
    split_technologies,
    to_draft,
    to_payload,
    update_draft,
)
from tests.support.project_fakes import make_project


def _filled_draft(**overrides: object) -> Draft:
    values: dict[str, object] = {
        "title": "Avtojon",
        "description": "Avto xizmatlar",
        "technology": "Vue",
        "deadline": "2025-09-01",
    }
    values.update(overrides)
    return Draft(**values)  # type: ignore[arg-type]


def test_empty_draft_defaults() -> None:
    draft = empty_draft()
    assert draft.title == ""
    assert draft.technologies == ""
    assert draft.students_count == 1
    assert draft.status == "planning"
    assert draft.progress_percent == 0
    assert draft.url == ""
    assert draft.logo == ""


def test_to_draft_joins_technologies_and_truncates_deadline() -> None:
    project = make_project(
        technologies=["React", "TS", "Node"],
        deadline=date(2025, 6, 1),
        url=None,
        logo=None,
    )

    draft = to_draft(project)

    assert draft.technologies == "React, TS, Node"
    assert draft.deadline == "2025-06-01"
    assert draft.url == ""
    assert draft.logo == ""
    assert draft.students_count == 4
    assert draft.status == "active"


def test_to_draft_without_deadline_gives_empty_string() -> None:
    assert to_draft(make_project(deadline=None)).deadline == ""


def test_split_technologies_trims_and_drops_blanks() -> None:
    assert split_technologies(" React ,, TS,  ,Node ") == ["React", "TS", "Node"]
    assert split_technologies("") == []
    assert split_technologies(" , ") == []


def test_to_payload_omits_empty_url_and_logo() -> None:
    payload = to_payload(_filled_draft(url="", logo=""))
    wire = payload.to_wire()

    assert payload.url is None
    assert "url" not in wire
    assert "logo" not in wire


def test_to_payload_keeps_explicit_url_and_wire_names() -> None:
    payload = to_payload(
        _filled_draft(url="https://avtojon.uz", technologies="Vue, Nuxt", students_count=3)
    )
    wire = payload.to_wire()

    assert wire["url"] == "https://avtojon.uz"
    assert wire["technologies"] == ["Vue", "Nuxt"]
    assert wire["students"] == 3
    assert wire["progress"] == 0
    assert wire["deadline"] == "2025-09-01"
    assert "_id" not in wire


def test_empty_technologies_text_yields_empty_list() -> None:
    assert to_payload(_filled_draft(technologies="")).technologies == []


@pytest.mark.parametrize("missing", ["title", "description", "technology", "deadline"])
def test_draft_missing_required_field_is_not_saveable(missing: str) -> None:
    assert not is_saveable(_filled_draft(**{missing: ""}))


def test_saveable_ignores_numbers_url_and_logo() -> None:
    draft = _filled_draft(students_count=0, progress_percent=250, url="", logo="")
    assert is_saveable(draft)
    assert not is_saveable(empty_draft())


def test_update_draft_replaces_one_field() -> None:
    draft = _filled_draft()
    updated = update_draft(draft, "title", "Mukammal ota-ona")

    assert updated.title == "Mukammal ota-ona"
    assert updated.description == draft.description
    assert draft.title == "Avtojon"


def test_update_draft_coerces_and_clamps_numbers() -> None:
    draft = update_draft(empty_draft(), "students_count", "-3")
    assert draft.students_count == 0
    assert update_draft(draft, "progress_percent", "75").progress_percent == 75


def test_update_draft_rejects_unknown_field() -> None:
    with pytest.raises(KeyError, match="Unknown draft field"):
        update_draft(empty_draft(), "owner", "x")


@pytest.mark.parametrize("blank", ["", "  ", None])
def test_update_draft_blank_number_is_zero(blank: object) -> None:
    draft = update_draft(empty_draft(), "students_count", blank)
    assert draft.students_count == 0
    assert update_draft(draft, "progress_percent", blank).progress_percent == 0


def test_update_draft_truncates_decimal_input() -> None:
    assert update_draft(empty_draft(), "progress_percent", "42.7").progress_percent == 42
    assert update_draft(empty_draft(), "students_count", 3.9).students_count == 3


@pytest.mark.parametrize("bad", ["abc", "nan", "inf"])
def test_update_draft_ignores_non_numeric_input(bad: str) -> None:
    draft = update_draft(empty_draft(), "students_count", "5")
    assert update_draft(draft, "students_count", bad) == draft
