from hypothesis import given
from hypothesis import strategies as st

from prox.core.drafts import Draft, is_saveable, to_draft, to_payload
from tests.support.project_fakes import make_project

_tag = st.text(
    alphabet=st.characters(exclude_characters=",", exclude_categories=("Cs", "Cc", "Zs", "Zl", "Zp")),
    min_size=1,
    max_size=12,
)
_words = st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=8)


@given(st.lists(_tag, max_size=6))
def test_technologies_survive_draft_round_trip(tags: list[str]) -> None:
    draft = to_draft(make_project(technologies=tags))
    assert to_payload(draft).technologies == tags


@given(
    title=_words,
    description=_words,
    technology=_words,
    deadline=st.sampled_from(["", "2025-01-01"]),
    students=st.integers(min_value=0, max_value=500),
    progress=st.integers(min_value=-10, max_value=200),
    url=_words,
    logo=_words,
)
def test_save_gate_depends_only_on_required_text_fields(
    title: str,
    description: str,
    technology: str,
    deadline: str,
    students: int,
    progress: int,
    url: str,
    logo: str,
) -> None:
    draft = Draft(
        title=title,
        description=description,
        technology=technology,
        deadline=deadline,
        students_count=students,
        progress_percent=progress,
        url=url,
        logo=logo,
    )
    expected = all(value != "" for value in (title, description, technology, deadline))
    assert is_saveable(draft) is expected


@given(url=_words, logo=_words)
def test_empty_optionals_are_absent_never_empty(url: str, logo: str) -> None:
    draft = Draft(title="t", description="d", technology="x", deadline="2025-01-01", url=url, logo=logo)
    wire = to_payload(draft).to_wire()
    assert wire.get("url", None) != ""
    assert wire.get("logo", None) != ""
    assert ("url" in wire) is (url != "")
