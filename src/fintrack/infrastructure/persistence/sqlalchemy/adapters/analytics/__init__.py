from fintrack.infrastructure.persistence.sqlalchemy.adapters.analytics.sqlalchemy_ledger_read_adapter import (  # NOQA: E501
    SqlAlchemyLedgerReadAdapter,
)

__all__ = ["SqlAlchemyLedgerReadAdapter"]
