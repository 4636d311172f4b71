"""
Keyword chatbot for the storefront.

Replies are picked by scanning ``KEYWORD_RESPONSES`` in order and taking the
first keyword that occurs anywhere in the lower-cased message. Order matters:
"hi" is checked before "shipping", so "shipping" questions get the greeting.
Questions about counts are answered from the live catalogue instead.
"""

import logging
from typing import List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.exceptions import InvalidInput
from app.services.stats_service import count_products

logger = logging.getLogger(__name__)

DEFAULT_RESPONSE = (
    "I'm here to help! You can ask me about our books, prices, shipping, "
    "or anything else about RapidReads."
)

COUNT_FALLBACK_RESPONSE = (
    "We have a great selection of books available! "
    "Browse our products page to see our full collection."
)

ERROR_RESPONSE = (
    "I'm sorry, I'm having some technical difficulties right now. "
    "Please try again in a moment!"
)

COUNT_TRIGGERS = ("how many", "count")

KEYWORD_RESPONSES: List[Tuple[str, str]] = [
    ("hello", "Hello! Welcome to RapidReads! How can I help you find your next great book today?"),
    ("hi", "Hi there! I'm here to help you with anything related to our bookstore. What can I do for you?"),
    ("books", "We have an amazing collection of books across many genres including Fantasy, Fiction, "
              "Classics, Self-help, and more! What type of book interests you?"),
    ("genres", "Our books cover many genres: Fantasy, Historical, Fiction, Self-help, Philosophical, "
               "Adventure, Classic, Commentary, Literature, and Political fiction."),
    ("price", "Our books are competitively priced, ranging from 34 AED to 95 AED. You can sort by price "
              "on our products page to find books within your budget!"),
    ("shipping", "We offer fast delivery across the UAE, usually within 2-3 business days. Orders are "
                 "processed quickly and shipped with care."),
    ("delivery", "We provide reliable delivery services throughout the UAE. Most orders arrive within "
                 "2-3 business days."),
    ("help", "I can help you with: finding books, information about genres, pricing details, shipping "
             "info, account questions, and general bookstore inquiries!"),
    ("account", "For account-related questions, you can register or login on our site. If you have "
                "specific account issues, please contact our support team."),
    ("authors", "We feature books from renowned authors like J.K. Rowling, Harper Lee, James Clear, "
                "Paulo Coelho, and many more classic and contemporary writers."),
    ("bestseller", "Some of our popular books include Harry Potter series, To Kill a Mockingbird, "
                   "Atomic Habits, and The Alchemist. Check out our full collection!"),
    ("recommend", "I'd be happy to recommend books! What genre do you enjoy? Are you looking for "
                  "fiction, self-help, classics, or something else?"),
    ("search", "You can search for books by title, author, or genre using the search bar on our "
               "products page. Try searching for your favorite author or genre!"),
    ("inventory", "We keep our inventory updated in real-time. If a book shows as available on the "
                  "product page, it's ready to ship!"),
    ("contact", "You can reach our support team at support@rapidread.com or call +971-555-123456 "
                "for any assistance."),
    ("thanks", "You're very welcome! I'm glad I could help. Happy reading, and enjoy your books "
               "from RapidReads!"),
    ("bye", "Goodbye! Thanks for visiting RapidReads. Come back anytime for more great books. "
            "Happy reading!"),
]


def match_keyword(message: str) -> str:
    lowered = message.lower()
    for keyword, response in KEYWORD_RESPONSES:
        if keyword in lowered:
            return response
    return DEFAULT_RESPONSE


def asks_for_count(message: str) -> bool:
    lowered = message.lower()
    return any(trigger in lowered for trigger in COUNT_TRIGGERS)


def count_response(session: Session) -> str:
    try:
        total = count_products(session)
    except SQLAlchemyError:
        logger.exception("Product count failed, using fallback reply")
        return COUNT_FALLBACK_RESPONSE
    return f"We currently have {total} books available in our collection across various genres!"


def respond(session: Session, message: str) -> str:
    if not message or not message.strip():
        raise InvalidInput("Message is required")

    if asks_for_count(message):
        return count_response(session)
    return match_keyword(message)
