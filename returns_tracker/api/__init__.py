from returns_tracker.api.client import ReturnsApiClient

__all__ = ["ReturnsApiClient"]
