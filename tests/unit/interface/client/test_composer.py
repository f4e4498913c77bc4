"""Unit tests for the comment composer and mention suggestions."""

import pytest

from graphreview.interface.client import (
    Composer,
    InputGeometry,
    Key,
    MentionIndex,
    SuggestionList,
)
from tests.factories import make_user
from tests.fakes import FakeCommentBackend

JANE = make_user("Jane Doe")
JANET = make_user("Janet Roe")
JOHN = make_user("John Smith")


@pytest.fixture
def composer() -> Composer:
    index = MentionIndex(FakeCommentBackend())
    index.seed([JANE, JANET, JOHN])
    return Composer(index)


class TestSuggestionList:
    def test_selection_wraps_both_ways(self):
        suggestions = SuggestionList()
        suggestions.open([JANE, JANET, JOHN])

        suggestions.move_up()
        assert suggestions.selected_index == 2

        suggestions.move_down()
        assert suggestions.selected_index == 0

    def test_open_resets_selection(self):
        suggestions = SuggestionList()
        suggestions.open([JANE, JANET])
        suggestions.move_down()

        suggestions.open([JOHN])

        assert suggestions.selected == JOHN

    def test_empty_list_is_not_active(self):
        suggestions = SuggestionList()
        suggestions.open([])

        assert not suggestions.is_active
        assert suggestions.selected is None


class TestComposer:
    def test_typing_trigger_opens_filtered_suggestions(self, composer):
        composer.set_text("Thanks @Ja")

        assert composer.mention.active
        assert composer.mention.query == "ja"
        assert composer.suggestions.items == [JANE, JANET]
        assert composer.anchor is not None

    def test_space_closes_suggestions(self, composer):
        composer.set_text("Thanks @Ja")

        composer.set_text("Thanks @Ja ")

        assert not composer.mention.active
        assert not composer.suggestions.is_active
        assert composer.anchor is None

    def test_no_matches_keeps_list_closed(self, composer):
        composer.set_text("@zzz")

        assert composer.mention.active
        assert not composer.suggestions.is_active

    def test_enter_commits_selected_user(self, composer):
        composer.set_text("Thanks @Ja")
        composer.handle_key(Key.ARROW_DOWN)

        consumed = composer.handle_key(Key.ENTER)

        assert consumed is True
        assert composer.text == "Thanks @Janet Roe "
        assert composer.caret == len(composer.text)
        assert not composer.suggestions.is_open

    def test_select_keeps_text_after_caret(self, composer):
        composer.set_text("Hi @Jo, welcome", caret=6)

        composer.select(JOHN)

        assert composer.text == "Hi @John Smith , welcome"
        assert composer.text[composer.caret :] == ", welcome"

    def test_escape_closes_without_editing(self, composer):
        composer.set_text("Thanks @Ja")

        assert composer.handle_key(Key.ESCAPE) is True
        assert composer.text == "Thanks @Ja"
        assert not composer.suggestions.is_open

    def test_keys_pass_through_when_list_closed(self, composer):
        composer.set_text("Plain text")

        for key in (Key.ARROW_UP, Key.ARROW_DOWN, Key.ENTER, Key.ESCAPE):
            assert composer.handle_key(key) is False

    def test_other_keys_pass_through(self, composer):
        composer.set_text("@Ja")

        assert composer.handle_key("a") is False
        assert composer.suggestions.is_open

    def test_click_outside_closes(self, composer):
        composer.set_text("@Ja")

        composer.click_outside()

        assert not composer.suggestions.is_open
        assert composer.text == "@Ja"

    def test_moving_caret_reevaluates(self, composer):
        composer.set_text("@Ja and more")
        assert not composer.mention.active

        composer.move_caret(3)

        assert composer.mention.query == "ja"

    def test_geometry_change_moves_anchor(self, composer):
        composer.set_text("@Ja")
        before = composer.anchor

        composer.set_geometry(InputGeometry(scroll_top=15))

        assert composer.anchor.top == before.top - 15

    def test_clear(self, composer):
        composer.set_text("@Ja")

        composer.clear()

        assert composer.text == ""
        assert composer.caret == 0
        assert not composer.mention.active
        assert not composer.suggestions.is_open
