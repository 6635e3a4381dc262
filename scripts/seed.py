#!/usr/bin/env python3
"""Seed database with sample affiliate platforms.

Creates tables if needed, then inserts each platform in SAMPLE_PLATFORMS
unless one with the same name already exists (safe to re-run).

Usage:
    python -m scripts.seed
"""

import asyncio
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
from sqlalchemy import select

from app.models import Platform
from app.stores.postgres import close_db, create_tables, get_session, init_db

load_dotenv()

SAMPLE_PLATFORMS = [
    {
        "name": "Amazon Associates",
        "description": "Earn commissions on qualifying purchases across the Amazon catalog.",
        "niches": ["general", "electronics", "books", "home"],
        "commission_rate": "10%",
        "api_url": "https://webservices.amazon.com/paapi5",
        "join_steps": [
            "Create an Amazon Associates account",
            "Add your website or app",
            "Complete the tax interview",
            "Make three qualifying sales within 180 days",
        ],
    },
    {
        "name": "ShareASale",
        "description": "Network of thousands of merchants across retail and services.",
        "niches": ["fashion", "home", "business"],
        "commission_rate": "20%",
        "api_url": "https://api.shareasale.com",
        "join_steps": [
            "Sign up as an affiliate",
            "Verify your email address",
            "Apply to individual merchant programs",
        ],
    },
    {
        "name": "ClickBank",
        "description": "Digital products marketplace with high payouts.",
        "niches": ["health", "fitness", "self-help", "e-business"],
        "commission_rate": "75%",
        "api_url": "https://api.clickbank.com/rest/1.3",
        "join_steps": [
            "Create a ClickBank account",
            "Browse the marketplace for offers",
            "Generate your HopLink",
        ],
    },
    {
        "name": "CJ Affiliate",
        "description": "Large network of established brands.",
        "niches": ["travel", "finance", "retail"],
        "commission_rate": "7.5%",
        "api_url": "https://developers.cj.com",
        "join_steps": [
            "Register as a publisher",
            "Complete your network profile",
            "Apply to advertiser programs",
        ],
    },
]


async def seed_platforms() -> None:
    """Insert sample platforms that are not present yet."""
    async with get_session() as session:
        for definition in SAMPLE_PLATFORMS:
            result = await session.execute(
                select(Platform).where(Platform.name == definition["name"])
            )
            if result.scalar_one_or_none():
                print(f"  skip {definition['name']} (exists)")
                continue

            session.add(Platform(**definition))
            print(f"  add  {definition['name']} ({definition['commission_rate']})")


async def main() -> None:
    await init_db()
    try:
        await create_tables()
        print("Seeding platforms...")
        await seed_platforms()
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
