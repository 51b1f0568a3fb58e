"""
Tests for list paging: message length and inline button limits.

Run with: python -m pytest tests/test_paging.py -v
"""
from __future__ import annotations

import pytest

from tasklist.domain.tasks.session import TaskListSession
from tasklist.ui.telegram import callbacks as cbd
from tasklist.ui.telegram.keyboards.common import ButtonSpec, build_kb, nav_row
from tasklist.ui.telegram.keyboards.tasks import task_list_kb
from tasklist.ui.telegram.paging import MAX_INLINE_BUTTONS, MAX_MESSAGE_LEN, PAGE_SIZE, page_of
from tasklist.ui.telegram.render import render_list_text, tg_len


def _fill(session: TaskListSession, n: int, text: str = "task {i}") -> list[str]:
    ids = []
    for i in range(n):
        session.draft.set_text(text.format(i=i))
        session.draft.set_category("work")
        session.draft.set_due_date("2024-03-01")
        ids.append(session.draft.commit().id)
    return ids


def _buttons(markup) -> int:
    return sum(len(row) for row in markup.inline_keyboard)


def test_long_list_fits_one_message_per_page(session: TaskListSession):
    _fill(session, 40, text="x" * 200 + " {i}")
    view = session.view()

    pages = page_of(view, 0).pages
    assert pages == 4
    for p in range(pages):
        text = render_list_text(view, "%Y-%m-%d", page_number=p)
        assert tg_len(text) <= MAX_MESSAGE_LEN, f"page {p} is {tg_len(text)} units"


def test_worst_case_escaping_stays_within_limit(session: TaskListSession):
    """300 '&' become 1500 chars of HTML each; overflow rows collapse into one line."""
    _fill(session, PAGE_SIZE, text="&" * 400)
    text = render_list_text(session.view(), "%Y-%m-%d")

    assert tg_len(text) <= MAX_MESSAGE_LEN
    assert "more" in text.splitlines()[-1]


def test_emoji_counted_as_utf16_units(session: TaskListSession):
    _fill(session, PAGE_SIZE, text="🎉" * 300)
    text = render_list_text(session.view())
    assert tg_len(text) <= MAX_MESSAGE_LEN
    assert tg_len("🎉") == 2


def test_pages_cover_every_task_once(session: TaskListSession):
    ids = _fill(session, 25)
    view = session.view()

    seen = []
    for p in range(page_of(view, 0).pages):
        seen.extend(t.id for t in page_of(view, p).rows)
    assert sorted(seen) == sorted(ids)
    assert len(seen) == len(set(seen))


def test_keyboard_under_button_limit_for_long_list(session: TaskListSession):
    _fill(session, 80)
    markup = task_list_kb(session.view())
    assert _buttons(markup) <= MAX_INLINE_BUTTONS


def test_row_callbacks_carry_page(session: TaskListSession):
    ids = _fill(session, PAGE_SIZE + 1)
    # last task lands alone on page 1
    data = [b.callback_data for row in task_list_kb(session.view(), 1).inline_keyboard for b in row]

    assert f"{cbd.PREFIX_TASK_TOGGLE}1:{ids[-1]}" in data
    assert all(len(d.encode()) <= 64 for d in data)


def test_page_of_clamps(session: TaskListSession):
    _fill(session, 12)
    view = session.view()

    assert page_of(view, 99).number == 1
    assert page_of(view, -3).number == 0
    assert page_of(session.view(), 0).pages == 2


def test_page_of_empty_view(session: TaskListSession):
    page = page_of(session.view(), 5)
    assert page.pages == 1
    assert page.number == 0
    assert page.rows == ()


def test_nav_row(session: TaskListSession):
    _fill(session, 3)
    assert nav_row(page_of(session.view(), 0), cbd.PREFIX_PAGE) == []

    _fill(session, 20)
    middle = nav_row(page_of(session.view(), 1), cbd.PREFIX_PAGE)
    assert [b.callback_data for b in middle] == ["page:0", "page:1", "page:2"]
    assert middle[1].text == "2/3"

    last = nav_row(page_of(session.view(), 2), cbd.PREFIX_PAGE)
    assert [b.text for b in last] == ["◀️", "3/3"]


def test_paged_header(session: TaskListSession):
    _fill(session, 15)
    assert "page 2/2" in render_list_text(session.view(), page_number=1)


def test_build_kb_rejects_too_many_buttons():
    rows = [[ButtonSpec(str(i), f"x:{i}")] for i in range(MAX_INLINE_BUTTONS + 1)]
    with pytest.raises(ValueError):
        build_kb(rows)


def test_build_kb_skips_empty_rows():
    markup = build_kb([[ButtonSpec("a", "a")], [], [ButtonSpec("b", "b")]])
    assert len(markup.inline_keyboard) == 2


def test_parse_page_and_id():
    assert cbd.parse_page_and_id("task:del:2:abc", cbd.PREFIX_TASK_DEL) == (2, "abc")
    assert cbd.parse_page_and_id("task:del:zz:abc", cbd.PREFIX_TASK_DEL) == (0, "abc")
    assert cbd.parse_page_and_id("task:del:abc", cbd.PREFIX_TASK_DEL) is None
    assert cbd.parse_page_and_id("task:del:3:", cbd.PREFIX_TASK_DEL) is None
