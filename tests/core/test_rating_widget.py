"""
Unit tests for the star rating widget.
"""

import pytest

from popcorn.core.rating import RatingWidget


@pytest.fixture
def commits():
    return []


@pytest.fixture
def widget(commits):
    return RatingWidget(max_rating=5, on_commit=commits.append)


class TestRatingWidget:
    """Tests for preview vs committed rating."""

    def test_defaults(self):
        """A new widget has 5 empty stars and no label."""
        widget = RatingWidget()
        assert widget.max_rating == 5
        assert widget.rating == 0
        assert widget.temp_rating == 0
        assert widget.stars() == [False] * 5
        assert widget.label == ""

    def test_click_hover_leave_scenario(self, widget, commits):
        """Click 3, hover 5, leave: display follows hover, committed stays 3."""
        widget.click(3)
        assert widget.rating == 3
        assert commits == [3]
        assert widget.full_count == 3

        widget.enter(5)
        assert widget.full_count == 5
        assert widget.rating == 3

        widget.leave(5)
        assert widget.full_count == 3
        assert widget.stars() == [True, True, True, False, False]
        assert commits == [3]

    def test_hover_never_commits(self, widget, commits):
        """Any sequence of enter/leave leaves the committed value alone."""
        widget.click(2)
        for position in [1, 5, 3, 4, 2, 5]:
            widget.enter(position)
            assert widget.rating == 2
            widget.leave(position)
            assert widget.rating == 2
        assert commits == [2]

    def test_leave_always_clears_preview(self, widget):
        """Leaving a different star than the one entered still clears the preview."""
        widget.enter(4)
        widget.leave(1)
        assert widget.temp_rating == 0
        widget.enter(2)
        widget.leave()
        assert widget.temp_rating == 0

    def test_each_click_notifies_once(self, widget, commits):
        """Every click fires exactly one notification, even for the same star."""
        widget.click(1)
        widget.click(4)
        widget.click(4)
        assert commits == [1, 4, 4]

    def test_default_rating(self):
        """default_rating is shown as committed."""
        widget = RatingWidget(max_rating=10, default_rating=7)
        assert widget.full_count == 7
        assert widget.label == "7"

    def test_numeric_label_prefers_preview(self, widget):
        """Without messages the label shows the preview, else the committed value."""
        widget.click(2)
        assert widget.label == "2"
        widget.enter(4)
        assert widget.label == "4"
        widget.leave(4)
        assert widget.label == "2"

    def test_messages_used_when_one_per_star(self):
        """Messages replace numbers when their count matches max_rating."""
        messages = ["Terrible", "Bad", "Okay", "Good", "Amazing"]
        widget = RatingWidget(max_rating=5, messages=messages)
        assert widget.label == ""
        widget.enter(5)
        assert widget.label == "Amazing"
        widget.leave(5)
        widget.click(2)
        assert widget.label == "Bad"

    def test_messages_ignored_when_count_differs(self):
        """A label list of the wrong length falls back to numbers."""
        widget = RatingWidget(max_rating=10, messages=["a", "b", "c", "d", "e"])
        widget.click(8)
        assert widget.label == "8"

    def test_out_of_range_position(self, widget):
        """Positions outside 1..max are rejected."""
        with pytest.raises(ValueError):
            widget.click(0)
        with pytest.raises(ValueError):
            widget.enter(6)

    def test_invalid_configuration(self):
        """Bad max_rating or default_rating raise ValueError."""
        with pytest.raises(ValueError):
            RatingWidget(max_rating=0)
        with pytest.raises(ValueError):
            RatingWidget(max_rating=5, default_rating=6)

    def test_cosmetic_options_do_not_change_behavior(self, commits):
        """Color and size are display hints only."""
        widget = RatingWidget(max_rating=3, color="red", size=12, on_commit=commits.append)
        widget.click(3)
        assert widget.stars() == [True, True, True]
        assert commits == [3]
