"""
Services package for request-scoped helpers built on the core pipeline.
"""

from vacation_manager.services.authorization import AuthorizationHelper, get_authorization_helper
from vacation_manager.services.validation import get_vacation_validation_service

__all__ = [
    "AuthorizationHelper",
    "get_authorization_helper",
    "get_vacation_validation_service",
]
