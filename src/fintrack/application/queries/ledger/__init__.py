from fintrack.application.queries.ledger.budget_status_query import BudgetStatusQuery
from fintrack.application.queries.ledger.get_transaction_query import (
    GetTransactionQuery,
)
from fintrack.application.queries.ledger.list_budgets_query import ListBudgetsQuery
from fintrack.application.queries.ledger.list_categories_query import (
    ListCategoriesQuery,
)
from fintrack.application.queries.ledger.list_transactions_query import (
    ListTransactionsQuery,
)

__all__ = [
    "BudgetStatusQuery",
    "GetTransactionQuery",
    "ListBudgetsQuery",
    "ListCategoriesQuery",
    "ListTransactionsQuery",
]
