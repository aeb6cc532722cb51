"""
Tests for per-recipe view state and the self-dismissing "copied" notice.

Streamlit is replaced by a Mock whose session_state is a plain dict.
"""

from unittest.mock import patch

import pytest

from recipe_ai.sharing import CopiedNotice
from ui.recipe_detail import NOTICE_REFRESH_SECONDS, render_copied_notice
from utils.session import get_copied_notice, get_view_value, set_view_value


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def session_state():
    with patch("utils.session.st") as st:
        st.session_state = {}
        yield st.session_state


class TestViewValues:
    """Test per-recipe keys in session state."""

    def test_default_is_stored(self, session_state):
        """Test that the default is returned and kept for the recipe."""
        assert get_view_value("portions", "Tomato Soup", 4) == 4
        set_view_value("portions", "Tomato Soup", 6)
        assert get_view_value("portions", "Tomato Soup", 4) == 6
        assert get_view_value("portions", "Beef Stew", 2) == 2


class TestCopiedNoticePerRecipe:
    """Test that the copied notice belongs to one recipe."""

    def test_notice_is_scoped_to_recipe(self, session_state):
        """Test that sharing one recipe does not show "copied" on another."""
        shared = get_copied_notice("Tomato Soup")
        shared.show()

        assert get_copied_notice("Tomato Soup") is shared
        assert shared.is_visible()
        assert not get_copied_notice("Beef Stew").is_visible()


class TestRenderCopiedNotice:
    """Test the auto-dismissing caption."""

    def test_hidden_notice_renders_nothing(self):
        """Test that no fragment or caption is created for a hidden notice."""
        with patch("ui.recipe_detail.st") as st:
            render_copied_notice(CopiedNotice(), "Copied!")
        st.fragment.assert_not_called()
        st.caption.assert_not_called()

    def test_visible_notice_reruns_until_expired(self):
        """Test that the caption refreshes on a timer and triggers a rerun once expired."""
        clock = FakeClock()
        notice = CopiedNotice(duration=2.5, clock=clock)
        notice.show()

        with patch("ui.recipe_detail.st") as st:
            render_copied_notice(notice, "Copied!")

            st.fragment.assert_called_once()
            body = st.fragment.call_args.args[0]
            assert st.fragment.call_args.kwargs["run_every"] == NOTICE_REFRESH_SECONDS
            st.fragment.return_value.assert_called_once_with()

            # Timer tick while still visible
            clock.now = 101.0
            body()
            st.caption.assert_called_once_with("✅ Copied!")
            st.rerun.assert_not_called()

            # Timer tick after the duration
            clock.now = 102.6
            body()
            st.rerun.assert_called_once_with()
            assert st.caption.call_count == 1

    def test_expired_notice_is_not_rendered_again(self):
        """Test that a full rerun after expiry drops the caption."""
        clock = FakeClock()
        notice = CopiedNotice(duration=2.5, clock=clock)
        notice.show()
        clock.now = 103.0

        with patch("ui.recipe_detail.st") as st:
            render_copied_notice(notice, "Copied!")
        st.fragment.assert_not_called()
