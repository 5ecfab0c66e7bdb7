"""Domain layer: enums and exceptions (no framework or infrastructure imports)."""
