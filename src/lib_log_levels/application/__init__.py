"""Application-layer contracts shared by adapters."""
