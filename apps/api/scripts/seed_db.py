"""
Seed the database with 100 users, 5-20 personal contacts each, and 200 spam reports.
Run from apps/api: python scripts/seed_db.py
"""
import asyncio
import logging
import random
import sys
from pathlib import Path

# Ensure callerid is importable when run from repo root or apps/api
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

logger = logging.getLogger(__name__)

from sqlalchemy import text

from callerid.core import hash_password
from callerid.db.session import async_session
from callerid.db.models import Contact, SpamReport, User

SEED_PASSWORD = "password123"
NUM_USERS = 100
MIN_CONTACTS_PER_USER = 5
MAX_CONTACTS_PER_USER = 20
NUM_SPAM_REPORTS = 200
EXTRA_SPAM_NUMBERS = 50
INTERNATIONAL_SHARE = 0.3  # share of numbers written with a leading +
EMAIL_SHARE = 0.7

FIRST_NAMES = [
    "Alex", "Jordan", "Sam", "Taylor", "Morgan", "Casey", "Riley", "Avery",
    "Jamie", "Quinn", "Reese", "Skyler", "Parker", "Blake", "Cameron", "Drew",
    "Emma", "Liam", "Olivia", "Noah", "Ava", "Ethan", "Sophia", "Mason",
    "Isabella", "William", "Mia", "James", "Charlotte", "Benjamin", "Amelia",
    "Lucas", "Harper", "Henry", "Evelyn", "Alexander", "Abigail", "Sebastian",
    "Emily", "Jack", "Ella", "Aiden", "Scarlett", "Owen", "Grace", "Samuel",
    "Alice", "Albert", "Carla", "Allison", "Malcolm", "Sally", "Calvin",
]

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson",
    "White", "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson", "Walker",
]

EMAIL_DOMAINS = ["example.com", "mail.example.org", "inbox.example.net"]


def generate_phone_number() -> str:
    digits = "".join(random.choices("0123456789", k=random.randint(7, 15)))
    if random.random() < INTERNATIONAL_SHARE:
        return f"+{digits}"
    return digits


def unique_phone_number(taken: set[str]) -> str:
    while True:
        phone = generate_phone_number()
        if phone not in taken:
            taken.add(phone)
            return phone


def random_name() -> str:
    return f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}"


async def reset_tables(session) -> None:
    """Empty the tables and restart id sequences."""
    try:
        await session.execute(text("TRUNCATE spam_reports, contacts, users RESTART IDENTITY CASCADE"))
        await session.commit()
        logger.info("Tables truncated and sequences reset.")
    except Exception as e:
        await session.rollback()
        logger.warning("Could not reset tables (run alembic upgrade head first?): %s", e)
        raise


async def run_seed():
    hashed = hash_password(SEED_PASSWORD)
    user_phones: set[str] = set()
    async with async_session() as session:
        await reset_tables(session)

        users: list[User] = []
        for i in range(NUM_USERS):
            name = random_name()
            email = None
            if random.random() < EMAIL_SHARE:
                email = f"{name.lower().replace(' ', '.')}{i + 1}@{random.choice(EMAIL_DOMAINS)}"
            user = User(
                name=name,
                phone_number=unique_phone_number(user_phones),
                email=email,
                password=hashed,
            )
            session.add(user)
            users.append(user)
        await session.flush()
        logger.info("Seeded %s users", len(users))

        user_numbers = [u.phone_number for u in users]
        contact_total = 0
        for user in users:
            saved: set[str] = {user.phone_number}
            for _ in range(random.randint(MIN_CONTACTS_PER_USER, MAX_CONTACTS_PER_USER)):
                # Some contacts point at registered users so reciprocal lookups have data
                if random.random() < 0.25:
                    phone = random.choice(user_numbers)
                    if phone in saved:
                        continue
                    saved.add(phone)
                else:
                    phone = unique_phone_number(saved)
                session.add(Contact(name=random_name(), phone_number=phone, user_id=user.id))
                contact_total += 1
        await session.flush()
        logger.info("Seeded %s contacts", contact_total)

        spam_pool = list(dict.fromkeys(user_numbers + [generate_phone_number() for _ in range(EXTRA_SPAM_NUMBERS)]))
        reported: set[tuple[str, int]] = set()
        for _ in range(NUM_SPAM_REPORTS):
            reporter = random.choice(users)
            phone = random.choice(spam_pool)
            if (phone, reporter.id) in reported:
                continue
            reported.add((phone, reporter.id))
            session.add(SpamReport(phone_number=phone, reported_by=reporter.id))

        await session.commit()

    logger.info("Done. Seeded %s spam reports", len(reported))
    logger.info("  Password for all seed users: %s", SEED_PASSWORD)
    logger.info("  Example login phone numbers: %s", ", ".join(user_numbers[:3]))


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.info("Starting seed: %s users, %s-%s contacts per user", NUM_USERS, MIN_CONTACTS_PER_USER, MAX_CONTACTS_PER_USER)
    asyncio.run(run_seed())
