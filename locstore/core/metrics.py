"""Prometheus metric definitions for schema migration runs."""

from __future__ import annotations

from prometheus_client import Counter, Histogram, Info

# ── Application info ────────────────────────────────────────────────
app_info = Info("locstore", "Location store metadata")

# ── Migration metrics ───────────────────────────────────────────────
schema_migrations_total = Counter(
    "schema_migrations_total",
    "Total schema migration runs",
    ["direction", "status"],
)

schema_migration_duration_seconds = Histogram(
    "schema_migration_duration_seconds",
    "Schema migration run duration in seconds",
    ["direction"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)
