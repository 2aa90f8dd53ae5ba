"""Request and response helpers."""
