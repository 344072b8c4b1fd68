"""API configuration adapter.

Bridges the centralized tasker_config settings with the API layer. Each app
instance carries its own ``Settings`` on ``app.state`` so tests can build apps
with different configurations side by side.
"""

from fastapi import Request

from tasker_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings
