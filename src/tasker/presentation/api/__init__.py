"""FastAPI presentation layer for Tasker."""
