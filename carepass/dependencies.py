"""
FastAPI dependencies exposing objects built once at application startup.
"""
from fastapi import Request

from .config import Settings
from .notifications.dispatcher import EmailDispatcher

def get_settings(request: Request) -> Settings:
    """
    Return the settings the application was built with.

    Args:
        request: Current request

    Returns:
        Settings
    """
    return request.app.state.settings

def get_email_dispatcher(request: Request) -> EmailDispatcher:
    """
    Return the email dispatcher selected at startup.

    Args:
        request: Current request

    Returns:
        EmailDispatcher
    """
    return request.app.state.email_dispatcher
