"""
services package – wrappers around the two OpenWeatherMap endpoints.

    from zipcast.services import ZipLookupService, OneCallService
"""

from .zip_lookup import ZipLookupService   # noqa: F401
from .one_call   import OneCallService     # noqa: F401
from .base       import ApiReply           # noqa: F401

__all__ = [
    "ApiReply",
    "ZipLookupService",
    "OneCallService",
]
