from __future__ import annotations

from typing import Callable, Iterator, Tuple

import pytest

from edit_engine.runtime.config import reset_settings

CURSOR = "<*>"


def parse_cursor(marked: str) -> Tuple[str, int]:
    """Split ``"ab<*>c"`` into ``("abc", 2)``."""

    offset = marked.index(CURSOR)
    return marked.replace(CURSOR, "", 1), offset


def render_cursor(text: str, offset: int | None) -> str:
    if offset is None:
        return text
    return text[:offset] + CURSOR + text[offset:]


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def cursor_text() -> Callable[[str], Tuple[str, int]]:
    return parse_cursor


@pytest.fixture
def with_cursor() -> Callable[[str, int | None], str]:
    return render_cursor
