"""Infrastructure Layer — database, content store, authentication and logging."""
