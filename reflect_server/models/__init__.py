from reflect_server.models.users import User
from reflect_server.models.user_profile import UserProfile
from reflect_server.models.health_entry import HealthEntry, Mood
from reflect_server.models.journal import Journal, JournalEntry
from reflect_server.models.chat_message import ChatMessage
from reflect_server.models.mood_checkin import MoodCheckIn, Feeling
