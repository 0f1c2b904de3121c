"""Adapters – persistence backends for the bucket log."""
