"""
demo.py - Demo data
Single responsibility: fill an empty store with a small sample dataset.
"""
import logging
from datetime import date, timedelta

logger = logging.getLogger(__name__)


def seed_demo_data(store) -> bool:
    """Insert sample groups, tags and items; returns False if the store already has data."""
    if store.list_items() or store.list_groups() or store.list_tags():
        logger.info("Store is not empty; demo data skipped")
        return False

    today = date.today()

    def days(n: int) -> str:
        return (today + timedelta(days=n)).isoformat()

    home = store.create_group("Home Renovation", "Kitchen and bathroom updates", "#FF6B6B")
    work = store.create_group("Work Tasks", "Q4 deliverables", "#4ECDC4")
    urgent = store.create_tag("Urgent", "#E74C3C")
    planning = store.create_tag("Planning", "#3498DB")

    store.create_item(
        "Get contractor quotes",
        description="Call three contractors for kitchen estimates",
        status="in_progress",
        priority=1,
        group_id=home,
        tag_id=planning,
        start_date=days(-3),
        due_date=days(4),
    )
    store.create_item("Buy paint samples", group_id=home, due_date=days(10), priority=3)
    store.create_item(
        "Fix leaking faucet",
        description="Bathroom sink drips overnight",
        status="blocked",
        priority=1,
        group_id=home,
        tag_id=urgent,
    )
    store.create_item(
        "Finish quarterly report",
        status="in_progress",
        priority=1,
        group_id=work,
        tag_id=urgent,
        due_date=days(2),
    )
    store.create_item("Plan team offsite", group_id=work, tag_id=planning, due_date=days(30))
    store.create_item("Review pull requests", status="completed", priority=2, group_id=work)
    store.create_item("Buy milk", priority=3)
    logger.info("Demo data seeded")
    return True
