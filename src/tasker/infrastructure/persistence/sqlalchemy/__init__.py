"""SQLAlchemy persistence for the task domain.

Engine and schema helpers live in ``engine``; repositories in ``repositories``.
"""
