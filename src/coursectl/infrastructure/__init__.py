"""Infrastructure layer: SQLite storage and the repositories built on it."""
