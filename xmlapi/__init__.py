"""Client for the remote XML node service."""
