from fintrack.application.commands.ledger.create_budget_command import (
    CreateBudgetCommand,
)
from fintrack.application.commands.ledger.create_category_command import (
    CreateCategoryCommand,
)
from fintrack.application.commands.ledger.create_transaction_command import (
    CreateTransactionCommand,
)
from fintrack.application.commands.ledger.delete_budget_command import (
    DeleteBudgetCommand,
)
from fintrack.application.commands.ledger.delete_category_command import (
    DeleteCategoryCommand,
)
from fintrack.application.commands.ledger.delete_transaction_command import (
    DeleteTransactionCommand,
)
from fintrack.application.commands.ledger.update_budget_command import (
    UpdateBudgetCommand,
)
from fintrack.application.commands.ledger.update_transaction_command import (
    UpdateTransactionCommand,
)

__all__ = [
    "CreateBudgetCommand",
    "CreateCategoryCommand",
    "CreateTransactionCommand",
    "DeleteBudgetCommand",
    "DeleteCategoryCommand",
    "DeleteTransactionCommand",
    "UpdateBudgetCommand",
    "UpdateTransactionCommand",
]
