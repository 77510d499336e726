#!/usr/bin/env python3
"""
Script to inject a sample newspaper catalog and articles into the database.
Gives the list form's selection controls something to show.

Usage: DATABASE_URL=postgresql://... python3 inject_sample_data.py
"""

import sys
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from newsdesk.core.database import Base, SessionLocal, engine
from newsdesk.models.article import Article
from newsdesk.models.newspaper import Newspaper


SAMPLE_NEWSPAPERS = [
    {
        "name": "Süddeutsche Zeitung",
        "url": "https://rss.sueddeutsche.de/rss/Topthemen",
        "articles": [
            ("Haushaltsstreit im Bundestag", "Jane Doe", "Politik"),
            ("Neue Pläne für den Nahverkehr", "John Roe", "München"),
        ],
    },
    {
        "name": "Die Zeit",
        "url": "https://newsfeed.zeit.de/index",
        "articles": [
            ("Was die Zinswende bedeutet", "Erika Mustermann", "Wirtschaft"),
            ("Ein Abend im Staatstheater", "Jane Doe", "Kultur"),
        ],
    },
    {
        "name": "taz",
        "url": "https://taz.de/!p4608;rss/",
        "articles": [
            ("Klimaziele in Gefahr", "Max Mustermann", "Öko"),
        ],
    },
]


def inject_sample_data():
    """Insert newspapers and their articles, skipping what already exists."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        added_newspapers = 0
        added_articles = 0
        now = datetime.utcnow()

        for entry in SAMPLE_NEWSPAPERS:
            newspaper = (
                db.query(Newspaper).filter(Newspaper.name == entry["name"]).first()
            )
            if not newspaper:
                newspaper = Newspaper(name=entry["name"], url=entry["url"])
                db.add(newspaper)
                db.flush()
                added_newspapers += 1
                print(f"✅ Added newspaper: {entry['name']}")
            else:
                print(f"⏭️  Skipped (exists): {entry['name']}")

            for i, (title, author, category) in enumerate(entry["articles"]):
                link = f"{entry['url']}#sample-{i + 1}"
                if db.query(Article).filter(Article.link == link).first():
                    continue
                db.add(
                    Article(
                        newspaper_id=newspaper.id,
                        title=title,
                        link=link,
                        author=author,
                        category=category,
                        published_date=now - timedelta(hours=i),
                    )
                )
                added_articles += 1

        db.commit()
        print(f"\n📰 {added_newspapers} newspapers and {added_articles} articles added")
    except SQLAlchemyError as e:
        db.rollback()
        print(f"❌ Error injecting sample data: {e}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    inject_sample_data()
