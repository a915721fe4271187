"""HTTP API for salary calculations."""
