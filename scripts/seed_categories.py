#!/usr/bin/env python3
"""
Seed the categories table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through the domain: rows are built from validated Category entities

Usage:
    python scripts/seed_categories.py
"""

from __future__ import annotations

import asyncio
import random
import sys
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete

from catalog_admin.adapters.sqlalchemy_category_repository import SqlAlchemyCategoryRepository
from catalog_admin.domain.category import Category
from catalog_admin.domain.value_objects import Uuid
from catalog_admin.infra.db.models.category import CategoryRow
from catalog_admin.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
BASE_CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)

# Genres with a short description each
GENRES = {
    "Action": "High-energy films with fights, chases and stunts",
    "Adventure": "Journeys, quests and exploration",
    "Animation": "Animated features for every age",
    "Comedy": "Films made to make you laugh",
    "Crime": "Heists, detectives and the underworld",
    "Documentary": "Non-fiction storytelling",
    "Drama": "Character-driven stories",
    "Family": "Suitable for the whole family",
    "Fantasy": "Magic, myths and other worlds",
    "Horror": "Films made to scare",
    "Musical": "Stories told through song and dance",
    "Mystery": "Puzzles and whodunits",
    "Romance": "Love stories",
    "Science Fiction": "Futures, space and technology",
    "Thriller": "Suspense from start to finish",
    "War": "Stories of conflict",
    "Western": "The American frontier",
}


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_category(name: str, description: str, index: int) -> Category:
    """Build one validated category with a deterministic id and creation time."""
    category = Category.create(
        name=name,
        # Roughly one in five categories has no description
        description=description if random.random() > 0.2 else None,
        # Roughly one in ten categories is inactive
        is_active=random.random() > 0.1,
    )
    category.category_id = Uuid(str(uuid.UUID(int=random.getrandbits(128), version=4)))
    category.created_at = BASE_CREATED_AT + timedelta(hours=index * 6 + random.randint(0, 5))
    return category


async def seed_categories(seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with category data.

    Args:
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {len(GENRES)} categories (seed={seed})...")

    async with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing categories...")
        result = await session.execute(delete(CategoryRow))
        print(f"   Deleted {result.rowcount} existing categories")

        # Step 2: Generate and insert new categories
        categories = [
            generate_category(name, description, index)
            for index, (name, description) in enumerate(GENRES.items())
        ]

        repository = SqlAlchemyCategoryRepository(session)
        await repository.bulk_insert(categories)

        print(f"✅ Successfully seeded {len(categories)} categories!")

        print("\n📊 Sample categories:")
        for i, category in enumerate(categories[:5], 1):
            status = "active" if category.is_active else "inactive"
            print(f"   {i}. {category.name} ({status}, created {category.created_at:%Y-%m-%d})")

        if len(categories) > 5:
            print(f"   ... and {len(categories) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        asyncio.run(seed_categories())
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
