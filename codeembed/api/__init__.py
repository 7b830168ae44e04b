"""HTTP API for the embed service."""
