"""
Python API wrapper for Compal ConnectBox cable routers

Usage:
    from connectbox import ConnectBoxAPI

    api = ConnectBoxAPI("192.168.0.1", "admin", "password")
    api.login()
    print(api.get_cm_state().temperature)
    api.logout()
"""

from .exceptions import (
    ConnectBoxError,
    DecodeError,
    InvalidAddressError,
    LoginError,
    ResponseStatusError,
    TransportError,
)
from .router_api import ConnectBoxAPI, normalize_address, parse_sid
from .router_auth import CredentialStore, Credentials, hash_password
from .router_types import RESPONSE_TYPES, Record, fahrenheit_to_celsius, parse_duration
from .xml_args import encode_args

__version__ = "0.1.0"

__all__ = [
    "ConnectBoxAPI",
    "ConnectBoxError",
    "CredentialStore",
    "Credentials",
    "DecodeError",
    "InvalidAddressError",
    "LoginError",
    "RESPONSE_TYPES",
    "Record",
    "ResponseStatusError",
    "TransportError",
    "encode_args",
    "fahrenheit_to_celsius",
    "hash_password",
    "normalize_address",
    "parse_duration",
    "parse_sid",
]
