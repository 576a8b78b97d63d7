"""
Service layer containing business logic.
"""
