"""System categories and demo data seeding for FinTrack.

System categories are inserted once and never duplicated. The demo user is
always recreated with fresh data for reproducibility.

Usage:
    seed-demo
    # or
    python -m fintrack_demo.seed

Options:
    --categories-only   Only ensure the system categories exist
"""

import asyncio
import logging
import random
import sys
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.application.commands.ledger import (
    CreateBudgetCommand,
    CreateTransactionCommand,
)
from fintrack.application.context import UserContext
from fintrack.domain.analytics.value_objects import Period
from fintrack.domain.ledger.entities import Category
from fintrack.domain.shared.time import utc_now
from fintrack.infrastructure.persistence.sqlalchemy.init_db import create_tables
from fintrack.infrastructure.persistence.sqlalchemy.models import (
    BudgetModel,
    CategoryModel,
    TransactionModel,
)
from fintrack.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from fintrack.presentation.api.dependencies import get_engine, get_session_maker
from fintrack_config.settings import get_settings
from fintrack_demo.data import (
    DEMO_BUDGETS,
    DEMO_USER_ID,
    MONTHLY_DISTRIBUTIONS,
    MONTHS_OF_HISTORY,
    RANDOM_SEED,
    SYSTEM_CATEGORIES,
    MonthlyDistribution,
    TransactionTemplate,
)

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


@dataclass
class SeedStats:
    """Statistics about what was seeded."""

    system_categories_created: int
    transactions_created: int = 0
    budgets_created: int = 0


async def seed_system_categories(session: AsyncSession) -> int:
    """Insert missing system categories; existing ones are left untouched."""
    factory = SQLAlchemyRepositoryFactory(session, UserContext(DEMO_USER_ID))
    category_repo = factory.category_repository()

    existing = {
        (c.name, c.category_type)
        for c in await category_repo.find_visible()
        if c.is_system
    }

    created = 0
    for definition in SYSTEM_CATEGORIES:
        if (definition.name, definition.category_type) in existing:
            continue
        await category_repo.save(
            Category.system(
                name=definition.name,
                category_type=definition.category_type,
                icon=definition.icon,
                color=definition.color,
            ),
        )
        created += 1

    logger.info("Created %d system categories", created)
    return created


async def reset_demo_user(session: AsyncSession, user_id: str) -> None:
    """Delete everything owned by the demo user."""
    for model in (TransactionModel, BudgetModel, CategoryModel):
        await session.execute(delete(model).where(model.user_id == user_id))
    logger.info("Cleared existing data for %s", user_id)


def generate_transaction_dates(
    period: Period,
    distribution: MonthlyDistribution,
    rng: random.Random,
    until: datetime,
) -> list[tuple[datetime, TransactionTemplate]]:
    """Draw dated templates for one month according to a distribution."""
    last_day = period.end.day
    drawn: list[tuple[datetime, TransactionTemplate]] = []

    if distribution.is_fixed_monthly:
        # Fixed items land on the same early days every month
        picks = [(rng.choice([1, 3, 5]), t) for t in distribution.templates]
    else:
        count = rng.randint(distribution.min_per_month, distribution.max_per_month)
        picks = [
            (rng.randint(1, last_day), rng.choice(distribution.templates))
            for _ in range(count)
        ]

    for day, template in picks:
        moment = period.start.replace(day=day, hour=rng.randint(7, 21))
        if moment <= until:
            drawn.append((moment, template))
    return drawn


def _draw_amount(template: TransactionTemplate, rng: random.Random) -> Decimal:
    if template.amount_min == template.amount_max:
        return template.amount_min
    spread = float(template.amount_max - template.amount_min)
    value = template.amount_min + Decimal(str(rng.uniform(0, spread)))
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


async def generate_transactions(
    factory: SQLAlchemyRepositoryFactory,
    categories: dict[str, Category],
    rng: random.Random,
    months: int,
) -> int:
    """Create transactions for the trailing ``months`` months up to now."""
    create_cmd = CreateTransactionCommand.from_factory(factory)
    now = utc_now()
    current = Period.containing(now)

    created = 0
    for offset in range(months - 1, -1, -1):
        period = current.shift(-offset)
        for distribution in MONTHLY_DISTRIBUTIONS:
            for moment, template in generate_transaction_dates(
                period,
                distribution,
                rng,
                until=now,
            ):
                category = categories.get(template.category_name)
                if category is None:
                    logger.warning("Unknown category in template: %s", template.category_name)
                    continue
                await create_cmd.execute(
                    transaction_type=category.category_type,
                    amount=_draw_amount(template, rng),
                    category_id=category.id,
                    date=moment,
                    description=template.description,
                )
                created += 1

    logger.info("Created %d demo transactions", created)
    return created


async def create_budgets(
    factory: SQLAlchemyRepositoryFactory,
    categories: dict[str, Category],
) -> int:
    create_cmd = CreateBudgetCommand.from_factory(factory)
    month = Period.containing(utc_now()).first_day

    created = 0
    for name, limit in DEMO_BUDGETS.items():
        category = categories.get(name)
        if category is None:
            continue
        await create_cmd.execute(category_id=category.id, amount=limit, month=month)
        created += 1

    logger.info("Created %d demo budgets", created)
    return created


async def seed_demo_data(
    with_demo_user: bool = True,
    user_id: str = DEMO_USER_ID,
    months: int = MONTHS_OF_HISTORY,
) -> SeedStats:
    """Ensure system categories exist and optionally recreate the demo user."""
    await create_tables(get_engine())

    async with get_session_maker()() as session:
        stats = SeedStats(system_categories_created=await seed_system_categories(session))

        if with_demo_user:
            await reset_demo_user(session, user_id)

            factory = SQLAlchemyRepositoryFactory(session, UserContext(user_id))
            categories = {
                c.name: c for c in await factory.category_repository().find_visible()
            }
            rng = random.Random(RANDOM_SEED)

            stats.transactions_created = await generate_transactions(
                factory,
                categories,
                rng,
                months,
            )
            stats.budgets_created = await create_budgets(factory, categories)

        await session.commit()

    logger.info("=" * 50)
    logger.info("Seeding complete!")
    logger.info("  System categories created: %d", stats.system_categories_created)
    if with_demo_user:
        logger.info("  Demo user: %s", user_id)
        logger.info("  Transactions: %d", stats.transactions_created)
        logger.info("  Budgets: %d", stats.budgets_created)
    logger.info("=" * 50)
    return stats


def main():
    """CLI entry point."""
    if "--help" in sys.argv or "-h" in sys.argv:
        print(__doc__)
        sys.exit(0)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    categories_only = "--categories-only" in sys.argv

    db_url = get_settings().database_url
    db_display = db_url.split("@")[-1] if "@" in db_url else db_url
    logger.info("FinTrack Seeder")
    logger.info("Database: %s", db_display)

    asyncio.run(seed_demo_data(with_demo_user=not categories_only))


if __name__ == "__main__":
    main()
