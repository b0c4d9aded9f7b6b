"""Pydantic DTOs for domain values and API contracts."""
