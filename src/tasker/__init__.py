"""Tasker - task management with ownership-scoped access.

Packages:
    tasker/              # Tasks domain, application services, API and CLI
    tasker_identity/     # Accounts, credentials, tokens, password reset
    tasker_config/       # Shared settings
"""
