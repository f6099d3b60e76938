"""FinTrack CLI application using Typer.

Database setup, seeding and a terminal rendition of the monthly report.
"""

import asyncio
from decimal import Decimal
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from fintrack.application.context import UserContext
from fintrack.application.dtos.analytics import AnalyticsReport
from fintrack.application.queries.analytics import AnalyticsStatsQuery
from fintrack.domain.shared.exceptions import DomainException
from fintrack.infrastructure.persistence.sqlalchemy.init_db import create_tables
from fintrack.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from fintrack.presentation.api.dependencies import get_engine, get_session_maker
from fintrack_config.settings import get_settings
from fintrack_demo.seed import seed_demo_data

app = typer.Typer(
    name="fintrack",
    help="FinTrack - personal finance tracking CLI",
    no_args_is_help=True,
)
console = Console()


db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


def _db_display() -> str:
    url = get_settings().database_url
    return url.split("@")[-1] if "@" in url else url


@db_app.command("init")
def db_init() -> None:
    """Create all missing tables (existing data is never touched)."""
    console.print(f"[dim]Database: {_db_display()}[/dim]")
    asyncio.run(create_tables())
    console.print("[bold green]Database schema is up to date[/bold green]")


@app.command("seed")
def seed(
    demo_user: bool = typer.Option(
        False,
        "--demo-user",
        help="Also recreate the demo user with six months of transactions",
    ),
) -> None:
    """Insert the system categories, optionally with demo data."""
    stats = asyncio.run(seed_demo_data(with_demo_user=demo_user))
    console.print(
        f"[green]System categories created:[/green] {stats.system_categories_created}",
    )
    if demo_user:
        console.print(f"[green]Transactions:[/green] {stats.transactions_created}")
        console.print(f"[green]Budgets:[/green] {stats.budgets_created}")


async def _load_report(user_id: str, month: str | None) -> AnalyticsReport:
    settings = get_settings()
    try:
        async with get_session_maker()() as session:
            factory = SQLAlchemyRepositoryFactory(session, UserContext.from_user_id(user_id))
            query = AnalyticsStatsQuery.from_factory(
                factory,
                trend_months=settings.analytics_trend_months,
                recent_limit=settings.analytics_recent_limit,
            )
            return await query.execute(month=month)
    finally:
        await get_engine().dispose()


def _money(value: Decimal) -> str:
    return f"{value:,.2f}"


def _change(value: Decimal) -> str:
    colour = "green" if value >= 0 else "red"
    return f"[{colour}]{value:+.1f}%[/{colour}]"


def _render_report(report: AnalyticsReport) -> None:
    summary = report.summary
    console.print(f"\n[bold]{report.period.label}[/bold]\n")

    totals = Table(title="Summary", show_header=True, header_style="bold")
    totals.add_column("")
    totals.add_column("Amount", justify="right")
    totals.add_column("vs. previous month", justify="right")
    totals.add_row("Income", _money(summary.total_income), _change(summary.income_change_pct))
    totals.add_row(
        "Expenses",
        _money(summary.total_expenses),
        _change(summary.expense_change_pct),
    )
    totals.add_row("[bold]Net[/bold]", f"[bold]{_money(summary.net_balance)}[/bold]", "")
    console.print(totals)

    for title, items in (
        ("Expenses by category", report.category_breakdown.expenses),
        ("Income by category", report.category_breakdown.income),
    ):
        if not items:
            continue
        table = Table(title=title, header_style="bold")
        table.add_column("Category")
        table.add_column("Amount", justify="right")
        table.add_column("Share", justify="right")
        for item in items:
            name = f"{item.icon} {item.category_name}" if item.icon else item.category_name
            table.add_row(name, _money(item.amount), f"{item.percentage:.1f}%")
        console.print(table)

    trend = Table(title="Monthly trend", header_style="bold")
    trend.add_column("Month")
    trend.add_column("Income", justify="right")
    trend.add_column("Expenses", justify="right")
    trend.add_column("Net", justify="right")
    for point in report.monthly_trend:
        trend.add_row(
            point.month,
            _money(point.income),
            _money(point.expenses),
            _money(point.net),
        )
    console.print(trend)

    if report.recent_transactions:
        recent = Table(title="Recent transactions", header_style="bold")
        recent.add_column("Date")
        recent.add_column("Category")
        recent.add_column("Description")
        recent.add_column("Amount", justify="right")
        for view in report.recent_transactions:
            txn = view.transaction
            sign = "+" if txn.is_income() else "-"
            recent.add_row(
                txn.date.date().isoformat(),
                view.category.name if view.category else "Unknown",
                txn.description or "",
                f"{sign}{_money(txn.amount)}",
            )
        console.print(recent)


@app.command("report")
def report(
    user_id: str = typer.Option(..., "--user-id", "-u", help="User whose ledger to read"),
    month: Optional[str] = typer.Option(
        None,
        "--month",
        "-m",
        help="YYYY-MM or YYYY-MM-DD (default: current month)",
    ),
) -> None:
    """Print the monthly dashboard report."""
    try:
        result = asyncio.run(_load_report(user_id, month))
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e
    _render_report(result)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default from settings)"),
    port: Optional[int] = typer.Option(None, help="Port (default from settings)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "fintrack.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
