"""
Client side of the portfolio API: cached reads, invalidating writes, notices.
"""

from .api import Notice, PortfolioClient, PortfolioClientError
from .cache import QueryCache

__all__ = ["Notice", "PortfolioClient", "PortfolioClientError", "QueryCache"]
