"""Core: configuration and composition root."""
