"""Custom exceptions for the directory client"""

from typing import Optional


class DirectoryError(Exception):
    """Base exception for directory lookup errors"""
    pass


class ValidationError(DirectoryError):
    """Raised when a lookup request is malformed or incomplete"""
    pass


class TransportError(DirectoryError):
    """Raised when the directory front-end does not answer successfully"""
    def __init__(self, status_line: str, status_code: Optional[int] = None):
        self.status_line = status_line
        self.status_code = status_code
        super().__init__(f"Error reading response: {status_line}")
