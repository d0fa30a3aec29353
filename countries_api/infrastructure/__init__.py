"""Infrastructure: database session management, store adapters' IO, and logging setup."""
