"""
Unit tests for static game details and mood-based game picks
"""
from moodlift.models.game import Game, DEFAULT_COLOR_FROM, DEFAULT_COLOR_TO
from moodlift.services.game_catalog import (
    DEFAULT_GAME_DETAILS,
    GAME_DETAILS,
    MOOD_GAME_RECOMMENDATIONS,
    get_game_details,
    get_game_recommendations,
)
from moodlift.services.game_service import join_colors


def test_known_game_details():
    details = get_game_details("Box Breathing")

    assert details.game_url == "/games/box-breathing"
    assert "Reduces Anxiety" in details.mood_benefits


def test_unknown_game_gets_default_details():
    assert get_game_details("Juggling") == DEFAULT_GAME_DETAILS
    assert DEFAULT_GAME_DETAILS.game_url == "/games/mindful-moments"


def test_recommendations_name_catalog_games():
    for mood, titles in MOOD_GAME_RECOMMENDATIONS.items():
        assert titles, mood
        for title in titles:
            assert title in GAME_DETAILS, f"{mood}: {title}"


def test_anxious_recommendations_lead_with_breathing():
    assert get_game_recommendations("anxious")[:2] == ["Box Breathing", "4-7-8 Breathing"]


def test_unknown_mood_has_no_recommendations():
    assert get_game_recommendations("confused") == []


def test_recommendations_are_copies():
    get_game_recommendations("happy").append("Juggling")
    assert "Juggling" not in get_game_recommendations("happy")


def test_colors_split_into_gradient_ends():
    game = Game(title="t", description="d", colors=join_colors("#111111", "#222222"))

    assert game.colors == "#111111-#222222"
    assert game.color_from == "#111111"
    assert game.color_to == "#222222"


def test_missing_colors_fall_back_to_defaults():
    game = Game(title="t", description="d", colors=None)

    assert game.color_from == DEFAULT_COLOR_FROM
    assert game.color_to == DEFAULT_COLOR_TO
    assert join_colors(None, "") == f"{DEFAULT_COLOR_FROM}-{DEFAULT_COLOR_TO}"
