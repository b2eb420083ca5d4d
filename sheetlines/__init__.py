"""
sheetlines is a library for reading rows of Google Sheets as header-keyed records, editing them
in place, and writing them back. It is built on top of Google's google-api-python-client and
google-auth libraries using the Google Sheets v4 REST API. Further details on these libraries and
APIs can be found here:

    google-api-python-client: https://github.com/googleapis/google-api-python-client
    google-auth-oauthlib: https://github.com/googleapis/google-auth-library-python-oauthlib
    Sheets v4: https://developers.google.com/sheets/api/reference/rest/
"""
import logging

from sheetlines import exceptions
from sheetlines.auth import CredentialManager
from sheetlines.client import Client
from sheetlines.config import Config
from sheetlines.convenience import open_ranges, save_sheet
from sheetlines.ranges import Line, Range

__all__ = (
    'Client',
    'Config',
    'CredentialManager',
    'Line',
    'Range',
    '__version__',
    'exceptions',
    'open_ranges',
    'save_sheet',
)

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
