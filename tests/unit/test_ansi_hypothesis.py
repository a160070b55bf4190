"""Property-based tests for the ANSI escape stripper using Hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clifx.ansi import strip_ansi, visible_width

pytestmark = pytest.mark.unit

plain_text = st.text(
    alphabet=st.characters(blacklist_characters="\x1b", blacklist_categories=("Cs",)),
    max_size=50,
)
sgr_codes = st.builds(
    lambda r, g, b: f"\x1b[38;2;{r};{g};{b}m",
    st.integers(0, 255),
    st.integers(0, 255),
    st.integers(0, 255),
)


class TestStripAnsiProperties:
    @given(plain_text)
    def test_plain_text_unchanged(self, text: str) -> None:
        assert strip_ansi(text) == text

    @given(st.lists(st.tuples(sgr_codes, plain_text), max_size=5))
    def test_colored_text_keeps_only_glyphs(self, parts) -> None:
        colored = "".join(code + text + "\x1b[0m" for code, text in parts)
        assert strip_ansi(colored) == "".join(text for _, text in parts)

    @given(plain_text)
    def test_idempotence(self, text: str) -> None:
        once = strip_ansi(text)
        assert strip_ansi(once) == once


@pytest.mark.parametrize(
    "code", ["\x1b[?25l", "\x1b[?25h", "\x1b[2K", "\x1b[4;8H", "\x1b[2A", "\x1b[1G"]
)
def test_cursor_controls_are_removed(code: str) -> None:
    assert strip_ansi(f"a{code}b") == "ab"


def test_visible_width() -> None:
    assert visible_width("\x1b[38;2;1;2;3mHello\x1b[0m") == 5
    assert visible_width("") == 0
