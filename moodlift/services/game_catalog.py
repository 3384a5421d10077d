"""Static details for the wellness games, keyed by game title."""

from moodlift.schemas.game import GameDetails

GAME_DETAILS = {
    "Diaphragmatic Breathing": GameDetails(
        mood_benefits=["Reduces Stress", "Improves Focus", "Enhances Relaxation"],
        duration="5-10 minutes",
        how_it_helps="Deep belly breathing technique to reduce stress and anxiety naturally.",
        game_url="/games/diaphragmatic-breathing",
    ),
    "Box Breathing": GameDetails(
        mood_benefits=["Calms Mind", "Reduces Anxiety", "Improves Concentration"],
        duration="4-8 minutes",
        how_it_helps="Navy SEAL breathing technique for staying calm under pressure with 4-4-4-4 pattern.",
        game_url="/games/box-breathing",
    ),
    "4-7-8 Breathing": GameDetails(
        mood_benefits=["Promotes Better Sleep", "Reduces Anxiety", "Calms the Nervous System"],
        duration="2-3 minutes",
        how_it_helps=(
            "Inhale for 4 seconds, hold for 7 seconds and exhale for 8 seconds to activate "
            "the parasympathetic nervous system, easing anxiety and preparing the body for sleep."
        ),
        game_url="/games/4-7-8-breathing",
    ),
    "Alternate Nostril Breathing": GameDetails(
        mood_benefits=["Balances Brain Hemispheres", "Promotes Deep Relaxation", "Enhances Mental Clarity"],
        duration="5-10 minutes",
        how_it_helps=(
            "A yogic breathing technique that alternates airflow between nostrils, "
            "settling the nervous system and improving focus and mental clarity."
        ),
        game_url="/games/alternate-nostril-breathing",
    ),
    "Describe Your Room": GameDetails(
        mood_benefits=["Improves Presence", "Grounds in Reality", "Enhances Sensory Awareness"],
        duration="1-2 minutes",
        how_it_helps=(
            "Anchor yourself in the present moment by describing your surroundings in detail, "
            "redirecting anxious thoughts through sensory awareness."
        ),
        game_url="/games/describe-room",
    ),
    "Name the Moment": GameDetails(
        mood_benefits=["Builds Self-Compassion", "Reduces Emotional Overwhelm", "Strengthens Inner Resilience"],
        duration="2-3 minutes",
        how_it_helps=(
            "A guided self-reassurance exercise: acknowledge difficult emotions with kindness "
            "and answer stress with self-support instead of self-criticism."
        ),
        game_url="/games/name-the-moment",
    ),
    "Physical Grounding": GameDetails(
        mood_benefits=["Anchors You in Your Body", "Releases Trauma Responses", "Activates Safety Signals"],
        duration="5-10 minutes",
        how_it_helps=(
            "Engage the five senses through tactile experiences to signal safety to the nervous "
            "system and move out of fight-or-flight into calm awareness."
        ),
        game_url="/games/physical-grounding",
    ),
    "Posture Reset": GameDetails(
        mood_benefits=["Releases Physical Tension", "Improves Body Awareness", "Restores Natural Alignment"],
        duration="1-1.5 minutes",
        how_it_helps=(
            "Adjust your posture and release tension with gentle movements to feel grounded "
            "and regain mental clarity."
        ),
        game_url="/games/posture-reset",
    ),
    "Self-Soothing": GameDetails(
        mood_benefits=["Soothes Emotional Pain", "Provides Immediate Relief", "Builds Distress Tolerance"],
        duration="5-10 minutes",
        how_it_helps=(
            "A DBT technique: soothe yourself through touch, smell, taste, sight and sound "
            "to build tolerance for distressing moments."
        ),
        game_url="/games/self-soothing",
    ),
    "CBT Thought-Challenger": GameDetails(
        mood_benefits=["Challenges Negative Thinking", "Reduces Anxiety", "Builds Emotional Resilience"],
        duration="10-15 minutes",
        how_it_helps=(
            "Examine the evidence for and against automatic negative thoughts and replace them "
            "with balanced, realistic perspectives."
        ),
        game_url="/games/cbt-thought-challenger",
    ),
    "Affirmation Mirror": GameDetails(
        mood_benefits=["Boosts Self-Esteem", "Builds Self-Compassion", "Reduces Negative Self-Talk"],
        duration="5-10 minutes",
        how_it_helps=(
            "Turn negative self-talk into personalized affirmations that support confidence "
            "and self-compassion."
        ),
        game_url="/games/affirmation-mirror",
    ),
    "Worry Box": GameDetails(
        mood_benefits=["Reduces Mental Clutter", "Prevents Rumination", "Increases Emotional Control"],
        duration="3-5 minutes",
        how_it_helps=(
            "Write worries down and put them away somewhere safe, creating distance that "
            "lowers their emotional intensity."
        ),
        game_url="/games/worry-box",
    ),
}

DEFAULT_GAME_DETAILS = GameDetails(
    mood_benefits=["Improves Wellbeing", "Reduces Stress", "Enhances Mood"],
    duration="5-10 minutes",
    how_it_helps="This activity is designed to support your emotional wellness and mental health.",
    game_url="/games/mindful-moments",
)

# ordered best-first; assessments use the first three
MOOD_GAME_RECOMMENDATIONS = {
    "happy": ["Affirmation Mirror", "Name the Moment", "Posture Reset", "Diaphragmatic Breathing"],
    "sad": ["Affirmation Mirror", "Self-Soothing", "Name the Moment", "CBT Thought-Challenger"],
    "anxious": ["Box Breathing", "4-7-8 Breathing", "Physical Grounding", "Worry Box"],
    "stressed": ["Diaphragmatic Breathing", "Worry Box", "Posture Reset", "Describe Your Room"],
    "bored": ["Describe Your Room", "CBT Thought-Challenger", "Alternate Nostril Breathing", "Affirmation Mirror"],
}


def get_game_details(title: str) -> GameDetails:
    return GAME_DETAILS.get(title, DEFAULT_GAME_DETAILS)


def get_game_recommendations(mood_type: str) -> list[str]:
    """
    Game titles suited to a mood type.

    Args:
        mood_type: happy, sad, anxious, stressed or bored

    Returns:
        Titles ordered best-first, empty list for unknown moods
    """
    return list(MOOD_GAME_RECOMMENDATIONS.get(mood_type, []))
