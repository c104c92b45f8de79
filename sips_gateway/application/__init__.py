"""Application layer - checkout use cases."""
