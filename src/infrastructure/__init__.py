"""Infrastructure adapters: database, record store, settings, logging."""
