"""
Authentication module for the membership platform.

This module provides the bearer-token gate placed in front of protected routes.
"""
