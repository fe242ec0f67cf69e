"""
Query construction for the directory search form.

The front-end accepts a single ``query`` field written in a small
mini-language:

    Smith,        last name only
    John.         first name only
    Smith,John    last name, then first name

Reverse lookups start from a username (``jsmith32``) or address
(``jsmith32@uwo.ca``) which is broken back down into a name query.
"""

import re
from collections.abc import Mapping
from typing import Any

from loguru import logger

from uwo_directory.exceptions import ValidationError
from uwo_directory.models import EmailQuery, LookupRequest, NameQuery

logger = logger.bind(module="query_builder")

# Username, optionally on the uwo.ca domain
ADDRESS_PATTERN = re.compile(r'^(\w+)(@uwo\.ca)?$', re.ASCII)

# jdoe32 -> first initial "j", last name "doe", discriminator "32"
USERNAME_PATTERN = re.compile(r'^(\w)([^\d]+)([\d]*)$', re.ASCII)


def build_query(query: NameQuery) -> str:
    """
    Build the form query string for a name lookup.

    Args:
        query: Name query with first and/or last name set

    Returns:
        Query string in the directory's mini-language

    Raises:
        ValidationError: If neither first nor last name is set
    """
    if query.is_empty:
        raise ValidationError('Need a first name or last name to build a query')

    if query.first is None:
        return f"{query.last},"
    if query.last is None:
        return f"{query.first}."
    return f"{query.last},{query.first}"


def extract_localpart(address: str) -> str:
    """Return the username portion of a bare username or uwo.ca address."""
    match = ADDRESS_PATTERN.match(address) if isinstance(address, str) else None
    if not match:
        raise ValidationError('Need a UWO username or e-mail address on the uwo.ca domain')
    return match.group(1)


def decompose_username(localpart: str) -> NameQuery:
    """
    Break a username down into the name query most likely to find it.

    Usernames are the first initial, the last name and an optional numeric
    suffix, so ``jdoe32`` becomes first="j", last="doe".

    Raises:
        ValidationError: If the username does not follow that shape
    """
    match = USERNAME_PATTERN.match(localpart)
    if not match:
        raise ValidationError('Failed to parse the username')

    first, last, _suffix = match.groups()
    logger.debug(f"Decomposed username {localpart!r} into first={first!r}, last={last!r}")
    return NameQuery(first=first, last=last)


def coerce_request(params: Any) -> LookupRequest:
    """
    Normalize a lookup request.

    Accepts a NameQuery, an EmailQuery, or a mapping with any of the keys
    ``first``, ``last`` and ``email``. An ``email`` key wins over names,
    even when its value is None.

    Raises:
        ValidationError: If the request is of an unsupported type or carries
            none of first name, last name or e-mail address
    """
    if isinstance(params, (NameQuery, EmailQuery)):
        request = params
    elif isinstance(params, Mapping):
        if 'email' in params:
            request = EmailQuery(address=params['email'])
        else:
            request = NameQuery(first=params.get('first'), last=params.get('last'))
    else:
        raise ValidationError('Request must be a NameQuery, EmailQuery or mapping')

    if isinstance(request, NameQuery) and request.is_empty:
        raise ValidationError(
            'Need at least one parameter (first name, last name or e-mail address)'
        )

    return request
