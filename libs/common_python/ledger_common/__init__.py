"""Helpers shared by the poker ledger services (database lifecycle, logging)."""
