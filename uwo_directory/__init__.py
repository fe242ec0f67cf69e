"""
Lookups against the University of Western Ontario student directory.
"""

from loguru import logger

# Silent until the application calls enable_logging()
logger.disable("uwo_directory")

from uwo_directory.client import DirectoryClient
from uwo_directory.directory_parser import DirectoryParser
from uwo_directory.exceptions import DirectoryError, TransportError, ValidationError
from uwo_directory.export import records_to_dataframe, save_records
from uwo_directory.models import ClientConfig, DirectoryRecord, EmailQuery, NameQuery
from uwo_directory.query_builder import build_query
from uwo_directory.transport import TransportClient
from uwo_directory.utils import disable_logging, enable_logging

__version__ = '0.1.0'

__all__ = [
    'DirectoryClient',
    'DirectoryParser',
    'TransportClient',
    'ClientConfig',
    'DirectoryRecord',
    'NameQuery',
    'EmailQuery',
    'DirectoryError',
    'TransportError',
    'ValidationError',
    'build_query',
    'records_to_dataframe',
    'save_records',
    'enable_logging',
    'disable_logging',
]
