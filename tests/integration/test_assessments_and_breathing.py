"""
Integration tests for assessments, recommended books and breathing presets
"""
import pytest
from httpx import AsyncClient
from sqlalchemy import select

from moodlift.models.assessment import MoodAssessment
from moodlift.schemas.book import BookWrite
from moodlift.services.book_service import BookService

GAD7_MODERATE = [2, 2, 2, 1, 1, 1, 1]


@pytest.mark.asyncio
async def test_submit_assessment_with_recommendations(async_client: AsyncClient, store):
    books = BookService(store)
    await books.create_book(BookWrite(title="The Anxiety Toolkit", author="Alice Boyes", mood_tags=["Needs Support"]))
    await books.create_book(BookWrite(title="Joy Book", author="B", mood_tags=["Excellent"]))

    response = await async_client.post("/api/assessments", json={"test_type": "GAD7", "responses": GAD7_MODERATE})

    assert response.status_code == 201
    result = response.json()["data"]
    assert result["test_type"] == "gad7"
    assert result["total_score"] == 10
    assert result["severity"] == "Moderate anxiety"
    assert result["mood_result"] == "Needs Support"
    assert result["mood_type"] == "anxious"
    assert result["recommended_games"] == ["Box Breathing", "4-7-8 Breathing", "Physical Grounding"]
    assert [b["title"] for b in result["recommended_books"]] == ["The Anxiety Toolkit"]
    assert "Use our breathing exercises daily" in result["recommendations"]


@pytest.mark.asyncio
async def test_assessment_stored_for_signed_in_user(async_client: AsyncClient, engine, db_session, auth_headers):
    await async_client.post(
        "/api/assessments",
        json={"test_type": "phq9", "responses": [0] * 9, "user_session": "anon-1"},
        headers=auth_headers("user-9"),
    )

    row = (await db_session.execute(select(MoodAssessment))).scalar_one()
    assert row.user_id == "user-9"
    assert row.user_session == "anon-1"
    assert row.mood_result == "Minimal depression"
    assert row.mood_score == 0
    assert row.responses[0] == {
        "question": "Little interest or pleasure in doing things",
        "answer": "Not at all",
        "score": 0,
    }


@pytest.mark.asyncio
async def test_recommended_books_follow_latest_assessment(async_client: AsyncClient, store, auth_headers):
    books = BookService(store)
    await books.create_book(BookWrite(title="Support", author="A", rating=3.0, mood_tags=["Needs Support"]))
    await books.create_book(BookWrite(title="Top Rated", author="B", rating=5.0, mood_tags=["Excellent"]))
    headers = auth_headers("user-3")

    before = await async_client.get("/api/books/recommended", headers=headers)
    await async_client.post("/api/assessments", json={"test_type": "gad7", "responses": GAD7_MODERATE}, headers=headers)
    after = await async_client.get("/api/books/recommended", headers=headers)
    anonymous = await async_client.get("/api/books/recommended")

    assert [b["title"] for b in before.json()["data"]] == ["Top Rated", "Support"]
    assert [b["title"] for b in after.json()["data"]] == ["Support"]
    assert [b["title"] for b in anonymous.json()["data"]] == ["Top Rated", "Support"]


@pytest.mark.asyncio
async def test_assessment_scored_without_database(async_client: AsyncClient, unconfigured_store):
    """Test storage failures still return the scored result"""
    response = await async_client.post("/api/assessments", json={"test_type": "panas", "responses": [3] * 20})

    assert response.status_code == 201
    result = response.json()["data"]
    assert result["total_score"] == 50
    assert result["mood_result"] == "Good"
    assert result["recommended_books"] == []


@pytest.mark.asyncio
async def test_invalid_assessment_rejected(async_client: AsyncClient, engine):
    wrong_count = await async_client.post("/api/assessments", json={"test_type": "phq9", "responses": [0, 1]})
    unknown = await async_client.post("/api/assessments", json={"test_type": "bdi", "responses": [0]})
    malformed = await async_client.post("/api/assessments", json={"test_type": "phq9"})

    assert wrong_count.status_code == 400
    assert wrong_count.json()["error"] == "phq9 expects 9 responses, got 2"
    assert unknown.status_code == 400
    assert unknown.json()["error_code"] == "VALIDATION_ERROR"
    assert malformed.status_code == 400
    assert malformed.json()["error"].startswith("Invalid body.responses")


@pytest.mark.asyncio
async def test_breathing_presets(async_client: AsyncClient):
    response = await async_client.get("/api/breathing/presets")

    assert response.json()["data"] == ["4-7-8-breathing", "box-breathing", "diaphragmatic-breathing"]


@pytest.mark.asyncio
async def test_breathing_session_plan(async_client: AsyncClient):
    response = await async_client.get("/api/breathing/presets/box-breathing", params={"minutes": 3})

    plan = response.json()["data"]
    assert plan["name"] == "box-breathing"
    assert plan["minutes"] == 3
    assert len(plan["cycles"]) == 11 * 4
    assert plan["total_duration"] == 11 * 16
    assert plan["cycles"][0] == {"phase": "inhale", "duration": 4, "instruction": "Breathe in for four"}
    assert plan["cycles"][-1]["instruction"] == "Rest"


@pytest.mark.asyncio
async def test_breathing_default_minutes(async_client: AsyncClient):
    response = await async_client.get("/api/breathing/presets/diaphragmatic-breathing")

    assert response.json()["data"]["minutes"] == 2
    assert response.json()["data"]["total_duration"] == 112


@pytest.mark.asyncio
async def test_breathing_errors(async_client: AsyncClient):
    unknown = await async_client.get("/api/breathing/presets/lion-breath")
    bad_minutes = await async_client.get("/api/breathing/presets/box-breathing", params={"minutes": 4})

    assert unknown.status_code == 404
    assert unknown.json()["error"] == "Breathing preset 'lion-breath' not found"
    assert bad_minutes.status_code == 400
    assert bad_minutes.json()["details"] == {"allowed": [2, 3, 5]}
