#!/usr/bin/env python3
"""
Ordered form arguments for the ConnectBox XML RPC

The router checks the position of the fields in getter/setter requests
(``token`` must come first, ``fun`` second), so arguments are kept as an
ordered list of pairs instead of a dict. Repeated keys are allowed.
"""

from typing import List, Sequence, Tuple
from urllib.parse import urlencode

XmlArgs = List[Tuple[str, str]]


def encode_args(args: Sequence[Tuple[str, str]]) -> str:
    """
    Encode arguments as an application/x-www-form-urlencoded body

    Keys and values are escaped like query strings (space becomes ``+``)
    and joined in the given order.

    Args:
        args: Sequence of (key, value) pairs

    Returns:
        Encoded body, e.g. ``token=t&fun=15&Username=bob``
    """
    return urlencode(list(args))


def build_args(token: str, fn: str, args: Sequence[Tuple[str, str]] = ()) -> XmlArgs:
    """Prepend the token and function code to the caller's arguments"""
    return [("token", token), ("fun", fn)] + list(args)
