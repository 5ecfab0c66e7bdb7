"""JSON API endpoint modules."""
