"""Core constants and types shared across the application."""
