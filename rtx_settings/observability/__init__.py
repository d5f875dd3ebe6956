"""Observability: structured logging via structlog."""
