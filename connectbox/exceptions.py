#!/usr/bin/env python3
"""
Exceptions raised by the ConnectBox API wrapper

Every failure a caller can see derives from ConnectBoxError, so one
``except ConnectBoxError`` covers the whole client. The subclasses tell
the phases apart:

- InvalidAddressError: the address given to the client is not a URL
- TransportError: no HTTP response was received (connection, timeout)
- ResponseStatusError: a response arrived with a status other than 200
- LoginError: the login handshake returned an unexpected body
- DecodeError: the response arrived but its XML could not be decoded
"""

from typing import Optional


class ConnectBoxError(Exception):
    """Base class for all ConnectBox API errors"""

    def add_context(self, context: str) -> "ConnectBoxError":
        """
        Prefix the message with the phase that failed

        The exception class is kept, so callers can still tell a status
        error from a decode error after it has been wrapped.

        Args:
            context: Short description of the failing step

        Returns:
            The same exception, for use in a raise statement
        """
        message = self.args[0] if self.args else ""
        self.args = (f"{context}: {message}",) + self.args[1:]
        return self


class InvalidAddressError(ConnectBoxError, ValueError):
    """Router address does not parse as an http(s) URL"""


class TransportError(ConnectBoxError):
    """Request failed before any HTTP response was received"""


class ResponseStatusError(ConnectBoxError):
    """Router answered with a status code other than 200"""

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"invalid response status: {status_code}")
        self.status_code = status_code
        self.body = body


class LoginError(ConnectBoxError):
    """Login handshake returned a body without success marker or SID"""


class DecodeError(ConnectBoxError, ValueError):
    """Response body could not be decoded into the requested record"""
