#!/usr/bin/env python3
"""Seed the locales table with the static locale list."""

import sys
import os

# Add parent directory to path to import app modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from translatable import create_app
from translatable.models import Locale
from translatable.services.locales import get_locales


def seed_locales():
    """Seed the locales database."""
    app = create_app()

    with app.app_context():
        print("Starting locale seeding...")

        existing_count = Locale.query.count()
        if existing_count:
            print(f"Found {existing_count} existing locales - nothing to do")
            return

        inserted = get_locales().seed()

        print(f"\n" + "="*50)
        print(f"Locale seeding completed!")
        print(f"Added: {inserted} locales")
        print(f"Total locales in database: {Locale.query.count()}")
        print("="*50)


if __name__ == '__main__':
    seed_locales()
