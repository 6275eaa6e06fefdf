from datetime import date, timedelta

from reflect_ai.config.insights import FALLBACK_SUGGESTIONS, GREETING_SUGGESTIONS, HEALTH_INSIGHTS
from reflect_ai.core.chat_service import ChatService


def make_entries(n, **metrics):
    start = date(2025, 11, 18)
    return [dict(entry_date=start - timedelta(days=i), **metrics) for i in range(n)]


def test_sleep_keywords():
    reply = ChatService().select_response("I can't sleep", [])
    sleep = HEALTH_INSIGHTS[0]
    assert reply["topic"] == "sleep"
    assert reply["response"] == sleep["response"]
    assert reply["suggestions"] == [
        "How can I improve my sleep?",
        "What affects my sleep quality?",
        "Sleep hygiene tips",
    ]


def test_match_is_case_insensitive_substring():
    assert ChatService().select_response("Feeling STRESSED today", [])["topic"] == "mood"
    assert ChatService().select_response("my Workouts", [])["topic"] == "exercise"
    assert ChatService().select_response("what should I eat for a meal", [])["topic"] == "nutrition"


def test_first_group_wins():
    # "tired" (sleep) and "sad" (mood) both match; sleep comes first
    assert ChatService().select_response("tired and sad", [])["topic"] == "sleep"


def test_returned_suggestions_are_copies():
    service = ChatService()
    reply = service.select_response("insomnia", [])
    reply["suggestions"].append("changed")
    assert len(service.select_response("insomnia", [])["suggestions"]) == 3


def test_summary_without_entries():
    reply = ChatService().select_response("hello there", [])
    assert reply["topic"] == "summary"
    assert reply["suggestions"] == FALLBACK_SUGGESTIONS
    assert "Your mood has been fairly stable." in reply["response"]
    assert "Your sleep might need attention - averaging 0.0 hours." in reply["response"]
    assert "Consider adding more physical activity to your routine." in reply["response"]
    assert reply["response"].startswith("Based on your recent health data")
    assert reply["response"].endswith("Would you like me to dive deeper into any specific area?")


def test_summary_positive_week():
    entries = make_entries(7, mood="excellent", sleep_hours=7.5, exercise_minutes=30, water_intake=8)
    reply = ChatService().select_response("how am I doing", entries)
    assert "Your mood has been quite positive recently!" in reply["response"]
    assert "average of 7.5 hours" in reply["response"]
    # 7 * 30 = 210 minutes
    assert "Great job staying active!" in reply["response"]


def test_summary_low_mood_and_middle_sleep():
    entries = make_entries(3, mood="terrible", sleep_hours=6.5, exercise_minutes=30)
    reply = ChatService().select_response("how am I doing", entries)
    assert "I notice your mood has been lower lately." in reply["response"]
    assert "Your sleep" not in reply["response"]
    # 90 minutes: neither remark
    assert "Great job" not in reply["response"]
    assert "Consider adding" not in reply["response"]


def test_summary_only_uses_latest_seven():
    recent = make_entries(7, mood="excellent", sleep_hours=8, exercise_minutes=0)
    older = [dict(e, mood="terrible", sleep_hours=0) for e in make_entries(20)]
    reply = ChatService().select_response("status", recent + older)
    assert "quite positive" in reply["response"]
    assert "average of 8.0 hours" in reply["response"]


def test_greeting():
    greeting = ChatService().greeting()
    assert greeting["suggestions"] == GREETING_SUGGESTIONS
    assert greeting["response"].startswith("Hello! I'm your health assistant.")
