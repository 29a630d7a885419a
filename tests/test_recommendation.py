"""
Tests for daily recommendations.
"""
from datetime import date

from src.models.phase import CyclePhase
from src.services.exceptions import AIServiceError
from src.services.recommendation import RecommendationService

AI_PLAN = {
    "nutrition": {"focus": "Steady blood sugar", "foods_to_eat": ["Lentils"], "foods_to_avoid": ["Soda"]},
    "exercise": {"focus": "Moderate", "recommended_types": ["Pilates"], "intensity": "medium"},
    "lifestyle": "Early night"
}

def test_daily_uses_engine_phase_and_ai_advice(mock_llm, catalog, pcos_profile):
    mock_llm.complete_json.return_value = {**AI_PLAN, "phase": "menstrual"}

    recommendation = RecommendationService(mock_llm, catalog).daily(pcos_profile, date(2024, 1, 20))

    assert recommendation.source == "ai"
    assert recommendation.phase == CyclePhase.LUTEAL
    assert recommendation.cycle_day == 20
    assert recommendation.nutrition.foods_to_eat == ["Lentils"]
    prompt = mock_llm.complete_json.call_args[0][0]
    assert "luteal (Day 20 of 28)" in prompt
    assert "insulin_resistant" in prompt

def test_daily_falls_back_when_ai_fails(mock_llm, catalog, pcos_profile):
    mock_llm.complete_json.side_effect = AIServiceError("timeout")

    recommendation = RecommendationService(mock_llm, catalog).daily(pcos_profile, date(2024, 1, 20))

    assert recommendation.source == "fallback"
    assert recommendation.phase == CyclePhase.LUTEAL
    assert recommendation.exercise.intensity.value == "medium"
    assert recommendation.nutrition.foods_to_eat[:2] == ["Wild Salmon", "Spinach"]
    assert "White Bread" in recommendation.nutrition.foods_to_avoid
    assert "Coffee" in recommendation.nutrition.foods_to_avoid
    assert not set(recommendation.nutrition.foods_to_eat) & set(recommendation.nutrition.foods_to_avoid)

def test_daily_falls_back_on_incomplete_plan(mock_llm, catalog, pcos_profile):
    mock_llm.complete_json.return_value = {"nutrition": {"focus": "x"}}

    recommendation = RecommendationService(mock_llm, catalog).daily(pcos_profile, date(2024, 1, 2))

    assert recommendation.source == "fallback"
    assert recommendation.phase == CyclePhase.MENSTRUAL
    assert recommendation.exercise.intensity.value == "low"

def test_daily_falls_back_without_api_key(monkeypatch, catalog, pcos_profile):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr("src.utils.clients._llm", None)

    recommendation = RecommendationService(catalog=catalog).daily(pcos_profile, date(2024, 1, 20))

    assert recommendation.source == "fallback"
    assert recommendation.phase == CyclePhase.LUTEAL
