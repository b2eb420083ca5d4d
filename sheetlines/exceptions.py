class SheetlinesException(Exception):
    """Base Exception for all other sheetlines exceptions

    This is intended to make catching exceptions from this library easier.
    """


class ConfigError(SheetlinesException):
    """ Neither a credentials file nor a client id / secret pair was provided """


class CredentialsReadError(SheetlinesException):
    """ The credentials file could not be read or is malformed """


class TokenReadError(SheetlinesException):
    """ The token file is missing or could not be parsed """


class TokenWriteError(SheetlinesException):
    """ A newly obtained token could not be persisted """


class InteractiveExchangeError(SheetlinesException):
    """ The authorization code was missing or rejected """


class NotAuthenticated(SheetlinesException):
    """ Calling the Sheets API before authenticating """


class RemoteReadError(SheetlinesException):
    """ Fetching ranges from Google Sheets failed """


class RemoteWriteError(SheetlinesException):
    """ Writing a range back to Google Sheets failed """


class ValidationError(SheetlinesException):
    """ A fetched range has no header row """
