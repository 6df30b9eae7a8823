"""
HTTP surface for the email composer.

Admin-only routes; the generation engine itself lives in `composer`.
"""

from .email_generate import router

__all__ = ["router"]
