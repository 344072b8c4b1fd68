"""Command-line interface for Tasker."""
