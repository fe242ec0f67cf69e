"""
Lookups against the University of Western Ontario student directory.

Only students who consented to publication are listed, so a missing
record does not mean the person is not enrolled.

Example:
    client = DirectoryClient()

    # Forward lookup by name
    for record in client.lookup({'first': 'John', 'last': 'S'}):
        print(record.email)

    # Reverse lookup by address
    record = client.lookup_reverse('jsmith@uwo.ca')
"""

from typing import Any, List, Optional, Union

from loguru import logger

from uwo_directory.directory_parser import DirectoryParser
from uwo_directory.models import ClientConfig, DirectoryRecord, EmailQuery, NameQuery
from uwo_directory.query_builder import (
    build_query,
    coerce_request,
    decompose_username,
    extract_localpart,
)
from uwo_directory.transport import TransportClient

logger = logger.bind(module="directory_client")


class DirectoryClient:
    """
    Forward and reverse lookups against the student directory.

    The configuration is fixed at construction, so a client holds no
    state that changes between calls.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        server: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        transport: Optional[TransportClient] = None,
        parser: Optional[DirectoryParser] = None,
    ):
        """
        Args:
            url: Directory front-end URL (default: public whois2html2 form)
            server: Backend server name passed to the form (default: localhost)
            config: Complete configuration, takes precedence over url/server
            transport: Transport to use instead of a TransportClient built from config
            parser: Parser to use instead of a default DirectoryParser
        """
        if config is None:
            defaults = ClientConfig()
            config = ClientConfig(
                endpoint_url=url or defaults.endpoint_url,
                backend_server=server or defaults.backend_server,
            )

        if transport is None:
            transport = TransportClient(timeout=config.timeout, user_agent=config.user_agent)

        self._config = config
        self._transport = transport
        self._parser = parser if parser is not None else DirectoryParser()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def lookup(self, request: Any) -> Union[List[DirectoryRecord], Optional[DirectoryRecord]]:
        """
        Look up a person by name or by e-mail address.

        Args:
            request: NameQuery, EmailQuery, or a mapping with ``first``,
                ``last`` and/or ``email`` keys

        Returns:
            For name lookups, a list of matching records (possibly empty).
            For e-mail lookups, the matching record or None.

        Raises:
            ValidationError: If the request is incomplete or the address
                cannot be turned into a name query
            TransportError: If the directory cannot be reached
        """
        request = coerce_request(request)

        if isinstance(request, EmailQuery):
            return self._lookup_email(request.address)
        return self._lookup_name(request)

    def lookup_reverse(self, address: str) -> Optional[DirectoryRecord]:
        """Find the record for a UWO username or uwo.ca address, or None."""
        return self.lookup(EmailQuery(address=address))

    def lookup_name(self, first: Optional[str] = None, last: Optional[str] = None) -> List[DirectoryRecord]:
        """Find all records matching a first and/or last name."""
        return self.lookup(NameQuery(first=first, last=last))

    def _lookup_name(self, query: NameQuery) -> List[DirectoryRecord]:
        search = build_query(query)
        logger.info(f"Searching directory for {search!r}")

        body = self._transport.post(
            self._config.endpoint_url,
            self._config.backend_server,
            search,
        )
        records = self._parser.parse(body)

        logger.info(f"Found {len(records)} records for {search!r}")
        return records

    def _lookup_email(self, address: str) -> Optional[DirectoryRecord]:
        name_query = decompose_username(extract_localpart(address))

        for record in self.lookup(name_query):
            if record.email == address:
                logger.success(f"Reverse lookup matched {address}")
                return record

        logger.info(f"No directory record for {address}")
        return None
