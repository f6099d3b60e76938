"""Analytics aggregation over the transaction ledger."""
