#!/usr/bin/env python3
"""Seed demo data for local development.

Creates a demo user and a handful of ponies in the configured database.
Re-running removes the previous demo ponies and user first.

Usage:
    # From project root:
    python scripts/seed_demo_data.py

    # Or against another database:
    DATABASE_URL=sqlite:///./demo.db python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.config import get_settings
from src.database import Base
from src.models import Pony, User
from src.services.auth import get_password_hash

DATABASE_URL = os.getenv("DATABASE_URL", get_settings().database_url)

# Demo user credentials
DEMO_EMAIL = "demo@example.com"
DEMO_NAME = "Demo User"
DEMO_PASSWORD = "demopass123"  # noqa: S105

DEMO_PONIES = [
    {
        "name": "Twilight Sparkle",
        "element": "Magic",
        "personality": "Studious and organized",
        "talent": "Spellcasting",
        "summary": "A unicorn scholar who discovers that friendship is its own kind of magic.",
    },
    {
        "name": "Rainbow Dash",
        "element": "Loyalty",
        "personality": "Brave and loyal",
        "talent": "Flying at supersonic speeds",
        "summary": "A brave pegasus pony who represents the element of loyalty.",
    },
    {
        "name": "Applejack",
        "element": "Honesty",
        "personality": "Dependable and hard-working",
        "talent": "Apple bucking",
        "summary": "An earth pony who runs Sweet Apple Acres with her family.",
    },
    {
        "name": "Rarity",
        "element": "Generosity",
        "personality": "Elegant and generous",
        "talent": "Fashion design",
        "summary": "A unicorn fashionista with an eye for gems.",
    },
    {
        "name": "Fluttershy",
        "element": "Kindness",
        "personality": "Gentle and shy",
        "talent": "Caring for animals",
        "summary": "A timid pegasus with a way with every creature.",
    },
    {
        "name": "Pinkie Pie",
        "element": "Laughter",
        "personality": "Hyper and cheerful",
        "talent": "Throwing parties",
        "summary": "An earth pony who lives to make others smile.",
    },
]


def image_url_for(name: str) -> str:
    slug = name.lower().replace(" ", "-")
    return f"{get_settings().public_base_url}/uploads/{slug}.png"


def seed_demo_data():
    """Seed the database with a demo user and ponies."""
    engine = create_engine(DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()

    try:
        existing_user = session.query(User).filter_by(email=DEMO_EMAIL).first()
        if existing_user:
            print("Demo data already exists. Clearing and re-seeding...")
            names = [pony["name"] for pony in DEMO_PONIES]
            session.query(Pony).filter(Pony.name.in_(names)).delete(synchronize_session=False)
            session.delete(existing_user)
            session.commit()

        session.add(
            User(
                name=DEMO_NAME,
                email=DEMO_EMAIL,
                password_hash=get_password_hash(DEMO_PASSWORD),
            )
        )
        session.add_all(
            Pony(**fields, image_url=image_url_for(fields["name"])) for fields in DEMO_PONIES
        )

        session.commit()
        print(f"Demo data seeded. Log in as {DEMO_EMAIL} / {DEMO_PASSWORD}")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
