"""
Services package initialization.
"""

from weatherapi.services.transport import HTTPTransport, parse_document

__all__ = [
    "HTTPTransport",
    "parse_document",
]
