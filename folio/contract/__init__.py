"""
Request/response contract shared by the server routers and the client.
"""

from .routes import API, Endpoint, build_url

__all__ = ["API", "Endpoint", "build_url"]
