"""Application layer: ports and pure tree helpers."""
