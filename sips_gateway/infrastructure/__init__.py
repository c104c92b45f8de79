"""Infrastructure layer - process execution and gateway clients."""
