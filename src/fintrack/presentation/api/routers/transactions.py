"""Transactions router for recording and browsing income and expenses."""

import logging
from datetime import datetime
from typing import Annotated, Literal
from uuid import UUID

from fastapi import APIRouter, Query, status

from fintrack.application.commands.ledger import (
    CreateTransactionCommand,
    DeleteTransactionCommand,
    UpdateTransactionCommand,
)
from fintrack.application.queries.ledger import (
    GetTransactionQuery,
    ListTransactionsQuery,
)
from fintrack.presentation.api.dependencies import RepoFactory
from fintrack.presentation.api.schemas.common import MessageResponse
from fintrack.presentation.api.schemas.transactions import (
    TransactionCreateRequest,
    TransactionResponse,
    TransactionUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

TypeFilter = Annotated[
    Literal["INCOME", "EXPENSE", "ALL"] | None,
    Query(alias="type", description="INCOME, EXPENSE or ALL"),
]
CategoryFilter = Annotated[UUID | None, Query(description="Only this category")]
StartDateFilter = Annotated[datetime | None, Query(description="Inclusive lower bound")]
EndDateFilter = Annotated[datetime | None, Query(description="Inclusive upper bound")]


@router.get("", summary="List transactions")
async def list_transactions(  # NOQA: PLR0913
    factory: RepoFactory,
    transaction_type: TypeFilter = None,
    category_id: CategoryFilter = None,
    start_date: StartDateFilter = None,
    end_date: EndDateFilter = None,
) -> list[TransactionResponse]:
    """Newest first, each with its category."""
    query = ListTransactionsQuery.from_factory(factory)
    views = await query.execute(
        transaction_type=transaction_type,
        category_id=category_id,
        start_date=start_date,
        end_date=end_date,
    )
    return [TransactionResponse.from_view(v) for v in views]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction",
    responses={
        201: {"description": "Transaction created"},
        400: {"description": "Invalid amount or unknown category"},
    },
)
async def create_transaction(
    request: TransactionCreateRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    command = CreateTransactionCommand.from_factory(factory)

    try:
        view = await command.execute(
            transaction_type=request.type,
            amount=request.amount,
            category_id=request.category_id,
            date=request.date,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return TransactionResponse.from_view(view)


@router.get(
    "/{transaction_id}",
    summary="Get a transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def get_transaction(
    transaction_id: UUID,
    factory: RepoFactory,
) -> TransactionResponse:
    query = GetTransactionQuery.from_factory(factory)
    return TransactionResponse.from_view(await query.execute(transaction_id))


@router.put(
    "/{transaction_id}",
    summary="Update a transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def update_transaction(
    transaction_id: UUID,
    request: TransactionUpdateRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    command = UpdateTransactionCommand.from_factory(factory)

    try:
        view = await command.execute(
            transaction_id=transaction_id,
            transaction_type=request.type,
            amount=request.amount,
            category_id=request.category_id,
            date=request.date,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return TransactionResponse.from_view(view)


@router.delete(
    "/{transaction_id}",
    summary="Delete a transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def delete_transaction(
    transaction_id: UUID,
    factory: RepoFactory,
) -> MessageResponse:
    command = DeleteTransactionCommand.from_factory(factory)

    try:
        await command.execute(transaction_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Transaction deleted successfully")
