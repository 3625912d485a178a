"""HTTP routers."""

from starter_api.routers import health, hello

__all__ = ["health", "hello"]
