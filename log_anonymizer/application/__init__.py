"""Application layer: scheduling and listings."""
