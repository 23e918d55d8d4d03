"""Shared cross-cutting helpers (telemetry, utilities). No domain imports."""
