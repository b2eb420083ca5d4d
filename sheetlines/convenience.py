"""
Convenience functions to simplify common end-user tasks like dumping or editing ranges

These can be imported accessed directly from the sheetlines module, e.g.::

    import sheetlines
    sheetlines.save_sheet(sheet_id, ['Sheet1'], credentials_path='credentials.json')
"""
from sheetlines.client import Client


def open_ranges(sheet_id, ranges, credentials_path=None, token_path=None, client_id=None,
                client_secret=None):
    """Authenticate and return the requested ranges as editable sheetlines.Range instances

    Args:
        sheet_id (str): The ID of the spreadsheet

        ranges (list): Range names in A1 notation. A single string is treated as one range

        credentials_path (str): Path to the OAuth client secrets file

        token_path (str): Where the authorized token is cached

        client_id (str): The OAuth client id, used if no credentials file is configured

        client_secret (str): The OAuth client secret, used if no credentials file is configured


    Returns:
        sheetlines.Range if one range is requested, otherwise an OrderedDict mapping each range
        name to its sheetlines.Range
    """
    client = Client(credentials_path=credentials_path, token_path=token_path)
    client.authenticate(client_id=client_id, client_secret=client_secret)
    return client.fetch_ranges(sheet_id, ranges)


def save_sheet(sheet_id, ranges, output_path='data.json', credentials_path=None, token_path=None,
               client_id=None, client_secret=None):
    """Authenticate, fetch the requested ranges as records, and write them to a JSON file

    With one range the file holds a list of records; with several it holds an object keyed by
    range name.

    Args:
        sheet_id (str): The ID of the spreadsheet

        ranges (list): Range names in A1 notation

        output_path (str): The file to write to

        credentials_path (str): Path to the OAuth client secrets file

        token_path (str): Where the authorized token is cached

        client_id (str): The OAuth client id, used if no credentials file is configured

        client_secret (str): The OAuth client secret, used if no credentials file is configured


    Returns:
        str: The absolute path of the written file
    """
    client = Client(credentials_path=credentials_path, token_path=token_path)
    client.authenticate(client_id=client_id, client_secret=client_secret)
    return client.save_sheet(sheet_id, ranges, output_path=output_path)
