"""
Assessment Service - Scores PHQ-9, GAD-7 and PANAS-SF questionnaires.

Scoring is pure; `AssessmentService.submit` adds persistence and the book and
game recommendations that follow from the result.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import select

from moodlift.core.exceptions import MoodLiftException, RequestValidationFailed
from moodlift.core.store import RemoteStore
from moodlift.models.assessment import MoodAssessment
from moodlift.schemas.assessment import AssessmentResultRead, AssessmentSubmission
from moodlift.services.book_service import BookService
from moodlift.services.game_catalog import get_game_recommendations

logger = logging.getLogger(__name__)

PANAS_POSITIVE_ITEMS = (0, 2, 4, 8, 9, 11, 13, 15, 16, 18)
PANAS_NEGATIVE_ITEMS = (1, 3, 5, 6, 7, 10, 12, 14, 17, 19)

PHQ9_QUESTIONS = [
    "Little interest or pleasure in doing things",
    "Feeling down, depressed, or hopeless",
    "Trouble falling or staying asleep, or sleeping too much",
    "Feeling tired or having little energy",
    "Poor appetite or overeating",
    "Feeling bad about yourself, or that you are a failure or have let yourself or your family down",
    "Trouble concentrating on things, such as reading the newspaper or watching television",
    "Moving or speaking so slowly that other people could have noticed, or being so fidgety "
    "or restless that you have been moving around a lot more than usual",
    "Thoughts that you would be better off dead, or of hurting yourself in some way",
]

GAD7_QUESTIONS = [
    "Feeling nervous, anxious, or on edge",
    "Not being able to stop or control worrying",
    "Worrying too much about different things",
    "Trouble relaxing",
    "Being so restless that it is hard to sit still",
    "Becoming easily annoyed or irritable",
    "Feeling afraid, as if something awful might happen",
]

PANAS_QUESTIONS = [
    "Interested in what was happening around you?",
    "Distressed or emotionally upset?",
    "Excited or energized?",
    "Upset or bothered by things?",
    "Strong or capable?",
    "Guilty about something?",
    "Scared or afraid?",
    "Hostile, angry, or irritated toward others?",
    "Enthusiastic or motivated?",
    "Proud of yourself or your actions?",
    "Irritable or easily annoyed?",
    "Alert and attentive to your surroundings?",
    "Ashamed or embarrassed about yourself?",
    "Inspired or uplifted?",
    "Nervous or tense?",
    "Determined to accomplish tasks or goals?",
    "Attentive and focused?",
    "Jittery or restless?",
    "Active and full of energy?",
    "Afraid or anxious?",
]

FREQUENCY_SCALE = ["Not at all", "Several days", "More than half the days", "Nearly every day"]
PANAS_SCALE = ["Very slightly or not at all", "A little", "Moderately", "Quite a bit", "Extremely"]

QUESTIONS = {"phq9": PHQ9_QUESTIONS, "gad7": GAD7_QUESTIONS, "panas": PANAS_QUESTIONS}


@dataclass(frozen=True)
class Band:
    """One severity band: applies to scores >= floor"""
    floor: int
    severity: str
    interpretation: str
    recommendations: tuple
    mood_result: str


# highest floor first
PHQ9_BANDS = (
    Band(20, "Severe depression", "You are experiencing severe depression symptoms.", (
        "Please contact a mental health professional immediately",
        "Speak with your doctor about treatment options as soon as possible",
        "Do not hesitate to reach out for emergency support if needed",
        "National Suicide Prevention Lifeline: 988",
        "Crisis Text Line: Text HOME to 741741",
    ), "Needs Support"),
    Band(15, "Moderately severe depression", "You are experiencing moderately severe depression symptoms.", (
        "We strongly recommend consulting with a mental health professional",
        "Contact your healthcare provider to discuss treatment options",
        "Reach out to trusted friends or family for support",
        "Consider therapy and/or medication under professional guidance",
        "If you have thoughts of self-harm, please seek immediate help",
    ), "Needs Support"),
    Band(10, "Moderate depression", "You are experiencing moderate depression symptoms.", (
        "Consider reaching out to a mental health professional",
        "Establish a daily routine with regular sleep and meal times",
        "Practice stress-reduction techniques regularly",
        "Avoid isolation - maintain social connections",
        "Consider professional counseling or therapy",
    ), "Needs Support"),
    Band(5, "Mild depression", "You are experiencing mild depression symptoms.", (
        "Consider incorporating mindfulness or meditation practices",
        "Engage in regular physical activity",
        "Try our wellness games to boost your mood",
        "Talk to someone you trust about how you are feeling",
        "Monitor your symptoms over the next few weeks",
    ), "Moderate"),
    Band(0, "Minimal depression", "You are experiencing minimal or no depression symptoms.", (
        "Continue with your current wellness routines",
        "Practice regular self-care activities",
        "Maintain healthy sleep, diet, and exercise habits",
        "Stay connected with friends and family",
    ), "Good"),
)

GAD7_BANDS = (
    Band(15, "Severe anxiety", "You are experiencing severe anxiety symptoms.", (
        "We recommend consulting with a mental health professional",
        "Contact your healthcare provider for treatment options",
        "Practice grounding techniques when anxious",
        "Reach out to trusted friends or family for support",
        "Consider therapy and/or medication under professional guidance",
    ), "Needs Support"),
    Band(10, "Moderate anxiety", "You are experiencing moderate anxiety symptoms.", (
        "Consider consulting with a mental health professional",
        "Practice anxiety-reduction techniques regularly",
        "Use our breathing exercises daily",
        "Maintain a consistent daily routine",
        "Consider cognitive behavioral therapy (CBT)",
    ), "Needs Support"),
    Band(5, "Mild anxiety", "You are experiencing mild anxiety symptoms.", (
        "Practice relaxation techniques like deep breathing",
        "Try our calm breath exercises",
        "Maintain regular physical activity",
        "Consider mindfulness meditation",
        "Limit caffeine intake",
    ), "Moderate"),
    Band(0, "Minimal anxiety", "You are experiencing minimal or no anxiety symptoms.", (
        "Continue with your current wellness routines",
        "Maintain healthy stress management practices",
        "Keep up regular exercise and sleep habits",
        "Stay connected with supportive people",
    ), "Good"),
)

PANAS_BANDS = (
    Band(60, "Highly Positive",
         "You are experiencing predominantly positive emotions with high energy and enthusiasm.", (
             "Continue engaging in activities that bring you joy",
             "Share your positive energy with others",
             "Maintain your current self-care practices",
             "Consider journaling to capture what contributes to your well-being",
         ), "Excellent"),
    Band(50, "Balanced",
         "You have a balanced emotional state with a mix of positive and negative emotions.", (
             "Continue with balanced wellness activities",
             "Practice mindfulness to stay present",
             "Engage in activities that boost positive emotions",
             "Maintain social connections",
         ), "Good"),
    Band(-100, "Negative Affect Dominant",
         "You are experiencing more negative emotions than positive ones currently.", (
             "Try our wellness games to boost your mood",
             "Practice gratitude exercises daily",
             "Engage in physical activity to improve mood",
             "Consider talking to someone about your feelings",
             "Practice stress-reduction techniques",
         ), "Needs Support"),
)

BANDS = {"phq9": PHQ9_BANDS, "gad7": GAD7_BANDS, "panas": PANAS_BANDS}


@dataclass(frozen=True)
class AssessmentScore:
    test_type: str
    total_score: int
    band: Band
    mood_type: str


def validate_responses(test_type: str, responses: List[int]) -> None:
    """
    Raises:
        RequestValidationFailed: unknown test, wrong answer count or out-of-range answer
    """
    if test_type not in QUESTIONS:
        raise RequestValidationFailed(
            f"Unknown test type '{test_type}'",
            details={"allowed": sorted(QUESTIONS)},
        )
    expected = len(QUESTIONS[test_type])
    if len(responses) != expected:
        raise RequestValidationFailed(
            f"{test_type} expects {expected} responses, got {len(responses)}",
            details={"expected": expected, "received": len(responses)},
        )
    low, high = (1, 5) if test_type == "panas" else (0, 3)
    for index, value in enumerate(responses):
        if not low <= value <= high:
            raise RequestValidationFailed(
                f"Response {index + 1} must be between {low} and {high}",
                details={"index": index, "value": value},
            )


def panas_total(responses: List[int]) -> int:
    positive = sum(responses[i] for i in PANAS_POSITIVE_ITEMS)
    negative = sum(responses[i] for i in PANAS_NEGATIVE_ITEMS)
    return positive - negative + 50


def mood_type_for(test_type: str, total_score: int) -> str:
    """Mood type used to pick games: happy, sad, anxious, stressed or bored."""
    if test_type == "gad7":
        return "anxious" if total_score >= 5 else "happy"
    if test_type == "phq9":
        return "sad" if total_score >= 5 else "happy"
    if test_type == "panas":
        if total_score >= 60:
            return "happy"
        if total_score >= 50:
            return "bored"
        return "stressed"
    return "happy"


def score_assessment(test_type: str, responses: List[int]) -> AssessmentScore:
    """
    Score one completed questionnaire

    Args:
        test_type: phq9, gad7 or panas
        responses: One answer per question, in question order

    Returns:
        Total score, matching severity band and mood type
    """
    validate_responses(test_type, responses)
    total = panas_total(responses) if test_type == "panas" else sum(responses)
    band = next(b for b in BANDS[test_type] if total >= b.floor)
    return AssessmentScore(
        test_type=test_type,
        total_score=total,
        band=band,
        mood_type=mood_type_for(test_type, total),
    )


def describe_responses(test_type: str, responses: List[int]) -> List[dict]:
    """Question text and answer label for each response, as stored with the result."""
    scale = PANAS_SCALE if test_type == "panas" else FREQUENCY_SCALE
    offset = 1 if test_type == "panas" else 0
    return [
        {"question": question, "answer": scale[score - offset], "score": score}
        for question, score in zip(QUESTIONS[test_type], responses)
    ]


class AssessmentService:
    """Scores, stores and follows up mood assessments"""

    def __init__(self, store: RemoteStore):
        self.store = store

    async def submit(
        self,
        submission: AssessmentSubmission,
        user_id: Optional[str] = None
    ) -> AssessmentResultRead:
        """
        Score a submission, store it and attach recommendations

        Storage and recommendation lookups are best effort: failures are
        logged and the scored result is still returned.

        Raises:
            RequestValidationFailed: invalid test type or responses
        """
        test_type = submission.test_type.lower()
        score = score_assessment(test_type, submission.responses)
        band = score.band

        await self._persist(score, submission, user_id)

        recommended_books = []
        try:
            recommended_books = await BookService(self.store).list_for_mood(band.mood_result)
        except MoodLiftException as e:
            logger.warning(f"Could not load book recommendations: {e.message}")

        return AssessmentResultRead(
            test_type=test_type,
            total_score=score.total_score,
            severity=band.severity,
            interpretation=band.interpretation,
            recommendations=list(band.recommendations),
            mood_result=band.mood_result,
            mood_type=score.mood_type,
            recommended_games=get_game_recommendations(score.mood_type)[:3],
            recommended_books=recommended_books,
        )

    async def latest_mood_result(self, user_id: str) -> Optional[str]:
        """Mood result category of the user's most recent assessment."""
        async with self.store.session() as db:
            result = await db.execute(
                select(MoodAssessment.test_type, MoodAssessment.mood_score)
                .where(MoodAssessment.user_id == user_id)
                .order_by(MoodAssessment.created_at.desc(), MoodAssessment.id.desc())
                .limit(1)
            )
            row = result.first()
        if row is None or row.test_type not in BANDS:
            return None
        return next(b for b in BANDS[row.test_type] if row.mood_score >= b.floor).mood_result

    async def _persist(
        self,
        score: AssessmentScore,
        submission: AssessmentSubmission,
        user_id: Optional[str]
    ) -> None:
        try:
            async with self.store.session() as db:
                db.add(MoodAssessment(
                    user_id=user_id,
                    user_session=submission.user_session,
                    test_type=score.test_type,
                    responses=describe_responses(score.test_type, submission.responses),
                    mood_result=score.band.severity,
                    mood_score=score.total_score,
                    recommendations=list(score.band.recommendations),
                ))
        except MoodLiftException as e:
            logger.error(
                f"Error saving assessment: {e.message}",
                extra={"test_type": score.test_type, "error_code": e.error_code.value},
            )
