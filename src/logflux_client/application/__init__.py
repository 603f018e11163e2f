"""Application layer: ports and delivery use cases."""
