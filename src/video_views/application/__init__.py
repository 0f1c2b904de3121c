"""Application layer – event log, aggregate, ranking and service."""
