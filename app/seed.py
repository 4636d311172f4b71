"""
Sample catalogue for local development.

Run ``python -m app.seed`` to load it into the configured database, or set
``SEED_SAMPLE_DATA=true`` to load it at startup. Products are only inserted
into an empty catalogue.
"""

import logging

from sqlmodel import Session

from app.models.product import Product
from app.services.stats_service import count_products

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "id": 201,
        "title": "Harry Potter and the Order of the Phoenix",
        "author": "J.K. Rowling",
        "genre": "Fantasy",
        "price": 57,
        "image": "book1.jpeg",
        "available_inventory": 7,
        "description": "The fifth book in the Harry Potter series follows Harry's fifth year at "
                       "Hogwarts School of Witchcraft and Wizardry.",
    },
    {
        "id": 202,
        "title": "A Long Petal of the Sea",
        "author": "Isabel Allende",
        "genre": "Historical",
        "price": 66,
        "image": "book2.jpg",
        "available_inventory": 6,
        "description": "A sweeping novel that tells the story of Victor Dalmau, a young doctor, and "
                       "Roser, a pregnant young woman, who flee the Spanish Civil War for Chile.",
    },
    {
        "id": 203,
        "title": "Dear Edward: A Read with Jenna Pick",
        "author": "Ann Napolitano",
        "genre": "Fiction",
        "price": 51,
        "image": "book3.jpg",
        "available_inventory": 8,
        "description": "A transcendent coming-of-age story about the sole survivor of a plane crash.",
    },
    {
        "id": 204,
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "genre": "Fiction",
        "price": 55,
        "image": "book4.jpg",
        "available_inventory": 5,
        "description": "Harper Lee's timeless classic explores themes of racial injustice and moral "
                       "growth through the eyes of Scout Finch in 1930s Alabama.",
    },
    {
        "id": 205,
        "title": "Atomic Habits",
        "author": "James Clear",
        "genre": "Self help",
        "price": 66,
        "image": "book5.jpg",
        "available_inventory": 10,
        "description": "James Clear presents a comprehensive guide to building good habits and "
                       "breaking bad ones.",
    },
    {
        "id": 206,
        "title": "The Alchemist",
        "author": "Paulo Coelho",
        "genre": "Philosophical",
        "price": 53,
        "image": "book6.jpg",
        "available_inventory": 10,
        "description": "Paulo Coelho's philosophical novel follows Santiago, a young shepherd, on "
                       "his journey to find treasure.",
    },
    {
        "id": 207,
        "title": "Famous Five: Five Go Off to Camp",
        "author": "Enid Blyton",
        "genre": "Adventure",
        "price": 34,
        "image": "book7.jpg",
        "available_inventory": 8,
        "description": "Join the Famous Five on another exciting adventure as they go camping and "
                       "discover mysterious happenings.",
    },
    {
        "id": 208,
        "title": "Little Women",
        "author": "Louisa May Alcott",
        "genre": "Classic",
        "price": 65,
        "image": "book8.jpg",
        "available_inventory": 9,
        "description": "Louisa May Alcott's beloved novel follows the lives of the four March "
                       "sisters as they grow from childhood to womanhood.",
    },
    {
        "id": 209,
        "title": "Middlemarch",
        "author": "George Eliot",
        "genre": "Commentary",
        "price": 95,
        "image": "book9.jpg",
        "available_inventory": 6,
        "description": "George Eliot's masterpiece is set in the fictional town of Middlemarch and "
                       "follows the lives of several characters.",
    },
    {
        "id": 210,
        "title": "Mrs Dalloway",
        "author": "Virginia Woolf",
        "genre": "Literature",
        "price": 55,
        "image": "book10.jpg",
        "available_inventory": 9,
        "description": "Virginia Woolf's modernist novel follows Clarissa Dalloway through a single "
                       "day in post-World War I London.",
    },
    {
        "id": 211,
        "title": "Continental Drift",
        "author": "Russell Banks",
        "genre": "Political",
        "price": 56,
        "image": "book11.jpg",
        "available_inventory": 8,
        "description": "Russell Banks' powerful novel tells the parallel stories of a New Hampshire "
                       "oil burner repairman and a Haitian refugee.",
    },
    {
        "id": 212,
        "title": "The Little Prince",
        "author": "Antoine de Saint-Exupéry",
        "genre": "Adventure",
        "price": 62,
        "image": "book12.jpg",
        "available_inventory": 10,
        "description": "Antoine de Saint-Exupéry's beloved tale of a pilot who meets a young prince "
                       "from another planet.",
    },
]


def seed_products(session: Session) -> int:
    """Insert the sample catalogue if no products exist. Returns rows added."""
    if count_products(session):
        logger.info("Products already present, skipping sample data")
        return 0

    session.add_all([Product(**data) for data in SAMPLE_PRODUCTS])
    session.commit()
    logger.info(f"Inserted {len(SAMPLE_PRODUCTS)} sample products")
    return len(SAMPLE_PRODUCTS)


if __name__ == "__main__":
    from app.config import settings
    from app.database import Database
    from app.middleware.request_logging import configure_logging

    configure_logging(settings.log_level)
    database = Database(settings.database_url)
    database.create_db_and_tables()
    with database.session() as session:
        seed_products(session)
    database.dispose()
