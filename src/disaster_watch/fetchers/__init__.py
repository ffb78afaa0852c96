"""Upstream feed adapters."""
