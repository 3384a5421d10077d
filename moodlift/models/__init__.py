"""
ORM models for the hosted MoodLift tables.

Importing this package registers every table on `Base.metadata`.
"""

from .favorite import UserFavorite
from .book import Book
from .game import Game
from .testimonial import Testimonial
from .consultant import Consultant
from .faq import Faq
from .seo import SeoMetadata
from .admin_user import AdminUser
from .assessment import MoodAssessment

__all__ = [
    "UserFavorite",
    "Book",
    "Game",
    "Testimonial",
    "Consultant",
    "Faq",
    "SeoMetadata",
    "AdminUser",
    "MoodAssessment",
]
