"""Kernel – errors, time and the view event model."""
