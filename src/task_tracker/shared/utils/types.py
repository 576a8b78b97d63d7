"""
Type aliases for identifiers passed between layers.
"""

UserId = str
TaskId = str
