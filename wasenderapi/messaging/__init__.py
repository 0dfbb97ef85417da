"""Outbound Wasender REST API: HTTP client, endpoint handlers and models."""
