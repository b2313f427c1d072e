"""Logging helpers for the account ledger."""
