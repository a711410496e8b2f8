"""Virtual economy service: ledger, inventory, store and gift escrow."""

__version__ = "0.1.0"
