"""
Shared fixtures for directory client tests.
"""

import pytest


PERALTA_BLOCK = (
    "Full Name: Peralta,Joyce Mae\n"
    "       E-mail: <A HREF=\"mailto:jperalt2@uwo.ca\">jperalt2@uwo.ca</A>\n"
    "Registered In: Faculty of Info & Media Stds"
)

SMITH_BLOCK = (
    "Full Name: Smith,John Robert\n"
    "       E-mail: <A HREF=\"mailto:jsmith32@uwo.ca\">jsmith32@uwo.ca</A>\n"
    "Registered In: Faculty of Science"
)

SMYTHE_BLOCK = (
    "Full Name: Smythe,Jane\n"
    "       E-mail: <A HREF=\"mailto:jsmythe@uwo.ca\">jsmythe@uwo.ca</A>\n"
    "Registered In: Faculty of Engineering"
)


def wrap_page(*blocks):
    """Wrap record blocks the way the directory front-end renders them."""
    body = "\n\n".join(blocks)
    return (
        "<HTML><HEAD><TITLE>Directory Search Results</TITLE></HEAD>\n"
        "<BODY>\n<PRE>\n"
        f"{body}\n"
        "</PRE>\n</BODY></HTML>\n"
    )


@pytest.fixture
def single_record_page():
    """Result page holding one record."""
    return wrap_page(PERALTA_BLOCK)


@pytest.fixture
def multi_record_page():
    """Result page holding three records."""
    return wrap_page(SMITH_BLOCK, PERALTA_BLOCK, SMYTHE_BLOCK)


@pytest.fixture
def empty_page():
    """Result page for a search with no matches."""
    return (
        "<HTML><HEAD><TITLE>Directory Search Results</TITLE></HEAD>\n"
        "<BODY>\n<H3>No matches found.</H3>\n</BODY></HTML>\n"
    )


class StubTransport:
    """Transport that records calls and serves a canned page."""

    def __init__(self, body=""):
        self.body = body
        self.calls = []

    def post(self, endpoint_url, backend_server, query):
        self.calls.append((endpoint_url, backend_server, query))
        return self.body


@pytest.fixture
def stub_transport():
    return StubTransport()
