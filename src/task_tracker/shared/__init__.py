"""
Shared building blocks used across the repository, service and router layers.
"""
