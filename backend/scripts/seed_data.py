"""Seed the database with the admin account and optional sample content."""
import sys
import os
import argparse
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.database import Database
from app.repositories import PostRepository, UpdateRepository, DownloadRepository
from app.services.auth_service import ensure_admin
from app.utils.helpers import today_str


def seed(with_samples: bool = False):
    database = Database(settings.DATABASE_URL)
    database.create_all()
    db = database.session()
    try:
        if ensure_admin(db, settings):
            print(f"Admin account '{settings.ADMIN_USERNAME}' created.")
        else:
            print(f"Admin account '{settings.ADMIN_USERNAME}' already exists. Skipping.")

        if not with_samples:
            return
        posts = PostRepository(db)
        if posts.get_all():
            print("Content already seeded. Skipping samples.")
            return

        posts.create(title="Bem-vindo ao Nexo", body="Primeiro post do site.", date=today_str())
        UpdateRepository(db).create(title="Versão 1.0", body="Lançamento inicial.", date=today_str())
        DownloadRepository(db).create(
            name="Nexo Client",
            version="1.0.0",
            description="Cliente oficial",
            external_link="https://example.com/nexo-client-1.0.0.zip",
            date=today_str(),
        )
        print("Sample content created.")
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--samples", action="store_true", help="also create sample posts, updates and downloads")
    args = parser.parse_args()
    seed(with_samples=args.samples)
