"""
Reflect & Connect health assistant
Rule-based replies: keyword groups first, then a summary of the latest entries
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from reflect_ai.config.insights import (
    FALLBACK_SUGGESTIONS,
    GREETING,
    GREETING_SUGGESTIONS,
    HEALTH_INSIGHTS,
    SUMMARY_CLOSING,
    SUMMARY_OPENING,
)
from reflect_ai.utils.metrics import DEFAULT_MOOD_VALUE, MetricSnapshot

logger = logging.getLogger(__name__)

RECENT_WINDOW = 7


class ChatService:
    """Health assistant that matches keywords against a static insight table"""

    def __init__(
        self,
        insights: Optional[List[Dict]] = None,
        recent_window: int = RECENT_WINDOW,
    ) -> None:
        self.insights = insights if insights is not None else HEALTH_INSIGHTS
        self.recent_window = recent_window

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def greeting(self) -> Dict:
        return {
            "response": GREETING,
            "suggestions": list(GREETING_SUGGESTIONS),
            "topic": "greeting",
        }

    def select_response(self, text: str, recent_entries: Sequence[Any]) -> Dict:
        """
        Pick the reply for one user message.

        Args:
            text: raw user input
            recent_entries: the user's health entries, most recent first

        Returns:
            {
                "response": "...",
                "suggestions": ["...", ...],
                "topic": "sleep" | "mood" | "exercise" | "nutrition" | "summary",
            }
        """
        matched = self._match_insight(text or "")
        if matched:
            logger.debug(f"[ChatService] keyword match: {matched['topic']}")
            return {
                "response": matched["response"],
                "suggestions": list(matched["suggestions"]),
                "topic": matched["topic"],
            }

        return {
            "response": self._summarize(recent_entries or []),
            "suggestions": list(FALLBACK_SUGGESTIONS),
            "topic": "summary",
        }

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------
    def _match_insight(self, text: str) -> Optional[Dict]:
        lowered = text.lower()
        for insight in self.insights:
            if any(trigger in lowered for trigger in insight["trigger"]):
                return insight
        return None

    def _summarize(self, entries: Sequence[Any]) -> str:
        recent = [MetricSnapshot.from_record(e) for e in list(entries)[: self.recent_window]]

        if recent:
            avg_mood = sum(s.mood_value for s in recent) / len(recent)
            avg_sleep = sum(s.sleep_hours for s in recent) / len(recent)
        else:
            avg_mood = DEFAULT_MOOD_VALUE
            avg_sleep = 0.0
        total_exercise = sum(s.exercise_minutes for s in recent)

        response = SUMMARY_OPENING

        if avg_mood >= 4:
            response += "🌟 Your mood has been quite positive recently! "
        elif avg_mood <= 2:
            response += "💙 I notice your mood has been lower lately. "
        else:
            response += "📊 Your mood has been fairly stable. "

        if avg_sleep >= 7:
            response += f"Your sleep quality looks good with an average of {avg_sleep:.1f} hours. "
        elif avg_sleep < 6:
            response += f"Your sleep might need attention - averaging {avg_sleep:.1f} hours. "

        if total_exercise > 150:
            response += "Great job staying active! "
        elif total_exercise < 60:
            response += "Consider adding more physical activity to your routine. "

        response += SUMMARY_CLOSING
        return response
