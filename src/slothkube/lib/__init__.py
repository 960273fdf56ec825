"""Shared helpers for slothkube: errors and logging."""
