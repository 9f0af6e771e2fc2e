"""Container unit tests."""
