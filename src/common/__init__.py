"""Shared helpers (logging, HTTP) for revlister."""
