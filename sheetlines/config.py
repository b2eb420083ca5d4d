"""
Configuration for sheetlines. Only two settings exist: where the OAuth client secrets live
and where the authorized token is cached.
"""
import os


DEFAULT_TOKEN_PATH = 'token.json'


class Config(object):
    def __init__(self, credentials_path=None, token_path=None):
        """Resolve the sheetlines settings once, at construction

        Args:
            credentials_path (str): Path to the OAuth client secrets JSON file. Defaults to
                ``$SHEETLINES_CREDENTIALS_PATH``. If neither is set, credentials-file auth is
                disabled and a client id / secret must be passed to authenticate() instead.

            token_path (str): Path at which the authorized token is cached. Defaults to
                ``$SHEETLINES_TOKEN_PATH``, or ``token.json`` in the working directory.
        """
        credentials_path = credentials_path or os.environ.get('SHEETLINES_CREDENTIALS_PATH')
        token_path = token_path or os.environ.get('SHEETLINES_TOKEN_PATH', DEFAULT_TOKEN_PATH)

        self.credentials_path = os.path.expanduser(credentials_path) if credentials_path else None
        self.token_path = os.path.expanduser(token_path)

    def __repr__(self):
        msg = "<{module}.{name}(credentials_path={credentials_path!r}, token_path={token_path!r})>"
        return msg.format(module=self.__class__.__module__,
                          name=self.__class__.__name__,
                          credentials_path=self.credentials_path,
                          token_path=self.token_path)

    @property
    def has_credentials_file(self):
        """ Whether authentication proceeds from a credentials file """
        return self.credentials_path is not None
