import json
import logging
import re
import traceback
from functools import wraps
from typing import Callable, Tuple

logger = logging.getLogger(__name__)


class UserFriendlyError(Exception):
    """Exception with a user-friendly message"""
    def __init__(self, user_message: str, technical_message: str = None):
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        super().__init__(self.technical_message)


class InvalidPatternError(UserFriendlyError):
    """A regex block-list entry failed to compile. Raised at Filter construction."""
    def __init__(self, pattern: str, reason: str = ""):
        self.pattern = pattern
        super().__init__(
            f"The block-list pattern {pattern!r} is not a valid regular expression.",
            f"invalid pattern {pattern!r}: {reason}" if reason else f"invalid pattern {pattern!r}",
        )


# Error message mappings
ERROR_MESSAGES = {
    InvalidPatternError: lambda e: (
        "Invalid pattern",
        f"{e.user_message}\n\n"
        "Fix the entry in your word list, or run without --regex to match "
        "words exactly."
    ),
    re.error: lambda e: (
        "Invalid pattern",
        f"A regular expression could not be compiled: {e}"
    ),
    json.JSONDecodeError: lambda e: (
        "Word list file error",
        "The word list is not valid JSON. JSON word lists must look like:\n\n"
        '{"filter": ["word", "another"]}'
    ),
    UnicodeDecodeError: lambda e: (
        "Word list file error",
        "The word list could not be read as UTF-8 text."
    ),

    # File errors
    FileNotFoundError: lambda e: (
        "File not found",
        f"The file could not be found. It may have been moved or deleted.\n\n"
        f"Path: {e.filename if getattr(e, 'filename', None) else 'Unknown'}"
    ),
    PermissionError: lambda e: (
        "Permission denied",
        "Unable to access this file. Please check that you have permission "
        "to read/write to this location."
    ),
    IsADirectoryError: lambda e: (
        "Invalid file",
        "Expected a file but got a folder. Please select a word list or config file."
    ),

    # Config errors
    "yaml": lambda e: (
        "Settings file error",
        "Your settings file could not be parsed. Check the YAML syntax or "
        "delete the file to use the defaults."
    ),

    OSError: lambda e: (
        "Disk error",
        "Unable to read or write files. Please check the path and your permissions."
    ),
}


def get_friendly_message(error: Exception) -> Tuple[str, str]:
    """Get user-friendly title and message for an error"""
    error_str = str(error).lower()

    # Check exact type matches first
    for error_type, msg_func in ERROR_MESSAGES.items():
        if isinstance(error_type, type) and isinstance(error, error_type):
            return msg_func(error)

    # Check string matches in error message or type name (case-insensitive)
    type_name = type(error).__module__.lower()
    for key, msg_func in ERROR_MESSAGES.items():
        if isinstance(key, str) and (key in error_str or key in type_name):
            return msg_func(error)

    # Default fallback
    return (
        "Something went wrong",
        f"An unexpected error occurred:\n\n{str(error)[:200]}"
    )


def handle_error(error: Exception, context: str = "") -> Tuple[str, str]:
    """Log error and return friendly message"""
    # Log full technical details
    logger.error(f"Error in {context}: {error}")
    logger.debug(traceback.format_exc())

    # Return friendly message
    return get_friendly_message(error)


def safe_operation(context: str = "operation"):
    """Decorator for safe error handling"""
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except UserFriendlyError:
                raise  # Already friendly, pass through
            except Exception as e:
                title, message = handle_error(e, context)
                raise UserFriendlyError(message, str(e)) from e
        return wrapper
    return decorator
