"""Application setup - dependency injection wiring."""
