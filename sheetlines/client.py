import logging

import apiclient

from sheetlines import exceptions, helpers
from sheetlines.auth import CredentialManager
from sheetlines.config import Config
from sheetlines.ranges import Range


logger = logging.getLogger(__name__)


class Client(object):
    def __init__(self, credentials_path=None, token_path=None, prompt=None):
        """Create a client for reading and writing ranges of Google Sheets

        No authorization happens here; call authenticate() before fetching data.

        Args:
            credentials_path (str): Path to the OAuth client secrets file. Defaults to
                ``$SHEETLINES_CREDENTIALS_PATH``. If neither is set, a client id and secret
                must be passed to authenticate()

            token_path (str): Where the authorized token is cached. Defaults to
                ``$SHEETLINES_TOKEN_PATH``, or ``token.json`` in the working directory

            prompt (callable): The operator-input channel for the one-time authorization
                exchange. Defaults to the builtin input()
        """
        self.config = Config(credentials_path=credentials_path, token_path=token_path)
        self.credential_manager = CredentialManager(self.config, prompt=prompt)
        self.credentials = None
        self.sheets_svc = None

    def __repr__(self):
        msg = "<{module}.{name}(state='{state}')>"
        return msg.format(module=self.__class__.__module__,
                          name=self.__class__.__name__,
                          state=self.credential_manager.state)

    def _set_api(self):
        if self.sheets_svc is None:
            # Bind sheets_svc directly to .spreadsheets() as the API exposes no other functionality
            self.sheets_svc = apiclient.discovery.build('sheets', 'v4', credentials=self.credentials,
                                                        cache_discovery=False).spreadsheets()

    def _fetch_ranges_raw(self, sheet_id, ranges):
        """Fetch the ValueRanges for the given ranges in one batchGet call

        Returns:
            list: One ValueRange per requested range, in request order
        """
        if not ranges:
            raise ValueError('You must specify ranges to get data!')
        if self.credentials is None:
            raise exceptions.NotAuthenticated('Call authenticate() before fetching data')

        self._set_api()
        try:
            response = self.sheets_svc.values().batchGet(spreadsheetId=sheet_id,
                                                         ranges=ranges).execute()
        except apiclient.errors.HttpError as e:
            msg = "Unable to fetch ranges {} from spreadsheet '{}'. Error generated: {}"
            raise exceptions.RemoteReadError(msg.format(ranges, sheet_id, e))

        return response.get('valueRanges', [])

    @staticmethod
    def _as_list(ranges):
        if isinstance(ranges, str):
            return [ranges] if ranges else []
        return list(ranges or [])

    def authenticate(self, client_id=None, client_secret=None):
        """Authorize this client to access Google Sheets

        Either a credentials file must be configured or `client_id` and `client_secret` must be
        given. A token cached at the token path is reused; otherwise you will be asked to visit
        an authorization URL and paste back the code it shows.

        Args:
            client_id (str): The OAuth client id, used if no credentials file is configured
            client_secret (str): The OAuth client secret, used if no credentials file is configured

        Returns:
            None
        """
        self.credentials = self.credential_manager.authenticate(client_id=client_id,
                                                                client_secret=client_secret)

    def fetch_data(self, sheet_id, ranges, fmt='dict'):
        """Fetch the rows of one or more ranges as header-keyed records

        The first row of each range is used as the headers.

        Args:
            sheet_id (str): The ID of the spreadsheet
            ranges (list): Range names in A1 notation, e.g. ['Sheet1', 'Other!A1:C20']. A single
                string is treated as one range
            fmt (str): The format in which to return each range. Accepted values: 'dict', 'df'

        Returns:
            When one range is requested, the formatted range. When several are requested, an
            OrderedDict mapping each range name to its formatted range.

            When fmt='dict' --> list of dicts, e.g.::

                [{header1: row1cell1, header2: row1cell2},
                 {header1: row2cell1, header2: row2cell2},
                 ...]

            When fmt='df' --> pandas.DataFrame
        """
        if fmt not in ('dict', 'df'):
            raise ValueError("Unexpected value '{}' for parameter `fmt`. "
                             "Accepted values are 'dict' and 'df'".format(fmt))

        ranges = self._as_list(ranges)
        logger.info('Fetching spreadsheet data...')
        value_ranges = self._fetch_ranges_raw(sheet_id, ranges)

        convert = helpers.grid_to_records if fmt == 'dict' else helpers.grid_to_df
        return helpers._format_value_ranges(ranges, value_ranges,
                                            lambda _, value_range: convert(value_range))

    def fetch_ranges(self, sheet_id, ranges):
        """Fetch one or more ranges as editable sheetlines.Range instances

        Args:
            sheet_id (str): The ID of the spreadsheet
            ranges (list): Range names in A1 notation. A single string is treated as one range

        Returns:
            sheetlines.Range if one range is requested, otherwise an OrderedDict mapping each
            range name to its sheetlines.Range
        """
        ranges = self._as_list(ranges)
        logger.info('Fetching ranges...')
        value_ranges = self._fetch_ranges_raw(sheet_id, ranges)

        return helpers._format_value_ranges(
            ranges, value_ranges,
            lambda range_name, value_range: Range(sheet_id, range_name, value_range,
                                                  self.sheets_svc)
        )

    def save_data(self, data, output_path):
        """Write already-fetched data to a JSON file

        Args:
            data (list or dict): The records, as returned by fetch_data()
            output_path (str): The file to write to

        Returns:
            str: The absolute path of the written file
        """
        output_path = helpers._write_json(data, output_path)
        logger.info('Data saved to %s', output_path)
        return output_path

    def save_sheet(self, sheet_id, ranges, output_path='data.json'):
        """Fetch the rows of one or more ranges and write them to a JSON file

        Args:
            sheet_id (str): The ID of the spreadsheet
            ranges (list): Range names in A1 notation
            output_path (str): The file to write to

        Returns:
            str: The absolute path of the written file
        """
        data = self.fetch_data(sheet_id, ranges)
        return self.save_data(data, output_path)
