"""Mock backend configuration via environment variables."""

from pydantic_settings import BaseSettings


class MockBackendSettings(BaseSettings):
    model_config = {"env_prefix": "MOCK_BACKEND_"}

    # Feed pending_connections from the connection history during verification.
    # When disabled, verify_no_pending_requests never finds anything.
    track_pending: bool = True

    # Used by the pytest plugin: verify no pending requests when a test finishes.
    verify_on_teardown: bool = False
