"""ORM models for the economy tables."""
