"""Economy feature modules: ledger, catalog, inventory, store, gifts, social, notifications."""
