"""Analytics read ports."""

from fintrack.application.ports.analytics.ledger_read_port import LedgerReadPort

__all__ = ["LedgerReadPort"]
