# reflect_ai/config/insights.py
"""
Canned chatbot content
- HEALTH_INSIGHTS: keyword groups, checked in order, first match wins
- GREETING / FALLBACK_SUGGESTIONS: used when a session starts or nothing matches
"""

from typing import Dict, List

HEALTH_INSIGHTS: List[Dict] = [
    {
        "topic": "sleep",
        "trigger": ["sleep", "tired", "exhausted", "insomnia"],
        "response": (
            "I notice you've been tracking your sleep patterns. Based on your data, "
            "here are some insights about your sleep quality and suggestions for improvement."
        ),
        "suggestions": [
            "How can I improve my sleep?",
            "What affects my sleep quality?",
            "Sleep hygiene tips",
        ],
    },
    {
        "topic": "mood",
        "trigger": ["mood", "depressed", "anxious", "stress", "sad"],
        "response": (
            "I see you're discussing your mood and mental health. "
            "Your diary entries show patterns that we can explore together."
        ),
        "suggestions": [
            "How is my mood trending?",
            "What affects my mood?",
            "Mental health resources",
        ],
    },
    {
        "topic": "exercise",
        "trigger": ["exercise", "workout", "fitness", "activity"],
        "response": (
            "Great to hear about your physical activity! "
            "Let me analyze your exercise patterns and provide some insights."
        ),
        "suggestions": [
            "Exercise recommendations",
            "How does exercise affect my mood?",
            "Fitness goals",
        ],
    },
    {
        "topic": "nutrition",
        "trigger": ["nutrition", "diet", "food", "eating", "meal"],
        "response": (
            "Nutrition plays a crucial role in your overall health. "
            "Let me help you understand the connection between your diet and well-being."
        ),
        "suggestions": [
            "Nutritional insights",
            "How does food affect my energy?",
            "Healthy eating tips",
        ],
    },
]

GREETING = (
    "Hello! I'm your health assistant. I can help you analyze your health data, "
    "provide insights, and answer questions about your wellness journey. "
    "What would you like to know?"
)

GREETING_SUGGESTIONS = [
    "Analyze my recent health trends",
    "What patterns do you see in my data?",
    "Give me health recommendations",
    "How can I improve my well-being?",
]

FALLBACK_SUGGESTIONS = [
    "Tell me more about my sleep patterns",
    "How can I improve my mood?",
    "What exercise routine would work for me?",
    "Show me my health trends",
]

SUMMARY_OPENING = "Based on your recent health data, here's what I've observed:\n\n"
SUMMARY_CLOSING = "\n\nWould you like me to dive deeper into any specific area?"
