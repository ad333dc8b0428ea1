"""
Python client for the BioUrb registry API.

Page controllers mirror the web screens (Home, Trees, Areas, Contact):
each one fetches or posts JSON through ``ApiClient`` and reports the
outcome through a ``Toaster``.
"""

from .api_client import ApiClient, ApiError
from .notifications import Toaster
from .session import AuthSession

__all__ = ["ApiClient", "ApiError", "AuthSession", "Toaster"]
