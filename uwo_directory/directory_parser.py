"""
Directory result page parser.

The directory front-end renders each match as a fixed three-line block
inside a <PRE> section:

    Full Name: Peralta,Joyce Mae
           E-mail: <A HREF="mailto:jperalt2@uwo.ca">jperalt2@uwo.ca</A>
    Registered In: Faculty of Info & Media Stds

The parser walks the page block by block rather than parsing the HTML,
so anything outside these blocks is ignored.
"""

import html
from typing import List, Optional, Tuple, Union

from loguru import logger

from uwo_directory.models import DirectoryRecord

logger = logger.bind(module="directory_parser")

# Block labels, including their exact leading indentation
FULL_NAME_LABEL = 'Full Name: '
EMAIL_LABEL = '       E-mail: '
FACULTY_LABEL = 'Registered In: '
LINK_CLOSE = '</A>'


def _split_line(text: str, start: int) -> Tuple[str, Optional[int]]:
    """
    Read from start to the end of the current line.

    Returns:
        Tuple of (line content, index after the newline or None at end of text)
    """
    end = text.find('\n', start)
    if end == -1:
        return text[start:], None
    return text[start:end], end + 1


def _extract_link_text(line: str) -> Optional[str]:
    """Return the text of the anchor closing the e-mail line, if any."""
    if not line.endswith(LINK_CLOSE):
        return None

    inner = line[:-len(LINK_CLOSE)]
    if len(inner) < 2:
        return None

    # Rightmost '>' that still leaves at least one character of link text
    marker = inner.rfind('>', 0, len(inner) - 1)
    if marker == -1:
        return None
    return inner[marker + 1:]


class DirectoryParser:
    """
    Extracts directory records from a raw result page.

    Matching is purely textual: a block is accepted only when all three
    lines are present with their labels, and every field is non-empty.
    Partial blocks are skipped silently.
    """

    def __init__(self, decode_entities: bool = True):
        """
        Args:
            decode_entities: Decode HTML entities (e.g. ``&amp;``) in captured fields
        """
        self.decode_entities = decode_entities

    def parse(self, raw_body: Union[str, bytes]) -> List[DirectoryRecord]:
        """
        Parse every record block in a result page.

        Args:
            raw_body: Page content as returned by the directory

        Returns:
            Records in order of appearance (empty if none matched)
        """
        if isinstance(raw_body, bytes):
            text = raw_body.decode('utf-8', errors='replace')
        else:
            text = raw_body or ''

        records = []
        pos = 0
        while True:
            start = text.find(FULL_NAME_LABEL, pos)
            if start == -1:
                break

            match = self._match_block(text, start + len(FULL_NAME_LABEL))
            if match is None:
                pos = start + 1
                continue

            fields, pos = match
            records.append(DirectoryRecord(*(self._decode(value) for value in fields)))

        logger.debug(f"Parsed {len(records)} directory records")
        return records

    def _match_block(self, text: str, cursor: int) -> Optional[Tuple[Tuple[str, str, str, str], int]]:
        """
        Match one record block starting just after its "Full Name: " label.

        Returns:
            Tuple of ((last, given, email, faculty), end index) or None
        """
        # Last name runs up to the first comma, wherever that is
        comma = text.find(',', cursor)
        if comma <= cursor:
            return None
        last_name = text[cursor:comma]

        given_name, cursor = _split_line(text, comma + 1)
        if not given_name or cursor is None:
            return None

        if not text.startswith(EMAIL_LABEL, cursor):
            return None
        email_line, cursor = _split_line(text, cursor + len(EMAIL_LABEL))
        if cursor is None:
            return None
        email = _extract_link_text(email_line)
        if email is None:
            return None

        if not text.startswith(FACULTY_LABEL, cursor):
            return None
        faculty_start = cursor + len(FACULTY_LABEL)
        faculty_end = text.find('\n', faculty_start)
        if faculty_end == -1:
            faculty_end = len(text)
        faculty = text[faculty_start:faculty_end]
        if not faculty:
            return None

        return (last_name, given_name, email, faculty), faculty_end

    def _decode(self, value: str) -> str:
        if self.decode_entities and '&' in value:
            return html.unescape(value)
        return value
