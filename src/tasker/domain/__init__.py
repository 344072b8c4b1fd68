"""Domain layer for the tasks bounded context."""
