"""Operational scripts (migrations, database bootstrap, dev tokens)."""
