from pydantic import BaseModel
from typing import List


class MetricTrend(BaseModel):
    average: float
    trend: float
    direction: str  # "up" | "down" | "flat"


class WeeklySummary(BaseModel):
    days_tracked: int
    total_exercise: int
    total_water: float


class Insight(BaseModel):
    kind: str
    title: str
    description: str


class ResponseStats(BaseModel):
    total_entries: int
    day_streak: int
    longest_streak: int
    window_days: int
    health_score: int
    health_score_label: str
    mood: MetricTrend
    sleep: MetricTrend
    exercise: MetricTrend
    water: MetricTrend
    total_exercise: int
    weekly: WeeklySummary
    insights: List[Insight]
