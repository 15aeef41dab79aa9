"""Application layer: ports and the fan-out use case."""
