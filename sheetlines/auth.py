"""
OAuth2 credential lifecycle for sheetlines.

Authorization proceeds as an installed application: the client id and secret come either from a
client secrets file or are passed explicitly, and the resulting token is cached on disk so that
the interactive exchange only happens the first time.
"""
import json
import logging

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error
from requests.exceptions import RequestException

from sheetlines import exceptions


logger = logging.getLogger(__name__)

SCOPES = ('https://www.googleapis.com/auth/spreadsheets',)
AUTH_URI = 'https://accounts.google.com/o/oauth2/auth'
TOKEN_URI = 'https://oauth2.googleapis.com/token'
OOB_REDIRECT_URI = 'urn:ietf:wg:oauth:2.0:oob'

UNAUTHENTICATED = 'UNAUTHENTICATED'
AUTHORIZING = 'AUTHORIZING'
AUTHENTICATED = 'AUTHENTICATED'


class CredentialManager(object):
    def __init__(self, config, prompt=None):
        """Obtain and cache the OAuth2 token used to talk to Google Sheets

        Args:
            config (sheetlines.config.Config): Where the client secrets and the token live

            prompt (callable): The operator-input channel used during the interactive exchange.
                It is called with a message and must return the authorization code the operator
                typed. Defaults to the builtin input(), which blocks without a timeout
        """
        self.config = config
        self.prompt = prompt or input
        self.state = UNAUTHENTICATED
        self.flow = None
        self.credentials = None
        self._client_config = None

    def __repr__(self):
        msg = "<{module}.{name}(state='{state}')>"
        return msg.format(module=self.__class__.__module__,
                          name=self.__class__.__name__,
                          state=self.state)

    def _read_client_secrets(self):
        """Read the client id, secret, and redirect URI from the client secrets file

        Both the 'installed' and the 'web' layouts produced by the Google API console are
        accepted.

        Returns:
            dict: The client configuration, with auth_uri and token_uri filled in if absent
        """
        path = self.config.credentials_path
        try:
            with open(path) as f:
                secrets = json.load(f)
        except (IOError, OSError, ValueError) as e:
            msg = "Unable to read credentials file '{}'. Error generated: {}"
            raise exceptions.CredentialsReadError(msg.format(path, e))

        try:
            app_secrets = secrets['installed'] if 'installed' in secrets else secrets['web']
            return self._build_client_config(client_id=app_secrets['client_id'],
                                             client_secret=app_secrets['client_secret'],
                                             redirect_uri=app_secrets['redirect_uris'][0],
                                             auth_uri=app_secrets.get('auth_uri'),
                                             token_uri=app_secrets.get('token_uri'))
        except (KeyError, IndexError, TypeError) as e:
            msg = "Malformed credentials file '{}': missing {}"
            raise exceptions.CredentialsReadError(msg.format(path, e))

    @staticmethod
    def _build_client_config(client_id, client_secret, redirect_uri=OOB_REDIRECT_URI,
                             auth_uri=None, token_uri=None):
        return {
            'client_id': client_id,
            'client_secret': client_secret,
            'redirect_uris': [redirect_uri],
            'auth_uri': auth_uri or AUTH_URI,
            'token_uri': token_uri or TOKEN_URI,
        }

    def _load_token(self):
        path = self.config.token_path
        try:
            with open(path) as f:
                token = json.load(f)
        except (IOError, OSError, ValueError) as e:
            raise exceptions.TokenReadError("Unable to read token '{}': {}".format(path, e))

        if not isinstance(token, dict):
            raise exceptions.TokenReadError("Token '{}' is not a JSON object".format(path))
        return token

    def _store_token(self, token):
        path = self.config.token_path
        try:
            with open(path, 'w') as f:
                json.dump(token, f)
        except (IOError, OSError, TypeError) as e:
            raise exceptions.TokenWriteError("Unable to store token at '{}': {}".format(path, e))
        logger.info('Token stored to %s', path)

    def _bind_token(self, token):
        """Attach the token to the client configuration so the auth library can refresh it

        A token without an access token is bound as is; google-auth refreshes it with the
        refresh token when the first request is rejected.
        """
        return Credentials(token=token.get('access_token') or token.get('token'),
                           refresh_token=token.get('refresh_token'),
                           token_uri=self._client_config['token_uri'],
                           client_id=self._client_config['client_id'],
                           client_secret=self._client_config['client_secret'],
                           scopes=list(SCOPES))

    def authenticate(self, client_id=None, client_secret=None):
        """Authorize this process to access Google Sheets

        If a credentials file is configured it takes precedence over `client_id` and
        `client_secret`. A cached token at the configured token path is reused when present;
        otherwise the operator is walked through the interactive exchange (see
        fetch_new_token()). A manager that is already authenticated returns its credentials
        immediately.

        Args:
            client_id (str): The OAuth client id, used if no credentials file is configured
            client_secret (str): The OAuth client secret, used if no credentials file is configured

        Returns:
            google.oauth2.credentials.Credentials: The authorized credentials
        """
        if self.state == AUTHENTICATED:
            return self.credentials

        if not self.config.has_credentials_file and not (client_id and client_secret):
            raise exceptions.ConfigError('You must either pass a client id & secret or specify '
                                         'a credentials_path!')

        if self.config.has_credentials_file:
            self._client_config = self._read_client_secrets()
        else:
            self._client_config = self._build_client_config(client_id, client_secret)

        self.flow = Flow.from_client_config({'installed': self._client_config}, scopes=SCOPES,
                                            redirect_uri=self._client_config['redirect_uris'][0])
        self.state = AUTHORIZING

        token = self.resolve_token()
        self.credentials = self._bind_token(token)
        self.state = AUTHENTICATED
        return self.credentials

    def resolve_token(self):
        """Return the cached token, or obtain a new one if none is usable

        No expiry check is made here; refreshing an expired access token is left to the
        google-auth library.

        Returns:
            dict: The token, as returned by the OAuth token endpoint
        """
        try:
            return self._load_token()
        except exceptions.TokenReadError:
            logger.info('Token is not found on path %s. Creating new token...',
                        self.config.token_path)
            return self.fetch_new_token()

    def fetch_new_token(self):
        """Run the interactive exchange: show the authorization URL and wait for the code

        The token obtained is stored at the configured token path. Failing to store it is
        logged but not raised, since the token is still usable for this process.

        Returns:
            dict: The token, as returned by the OAuth token endpoint
        """
        auth_url, _ = self.flow.authorization_url(access_type='offline', prompt='consent')
        logger.info('Authorize this app by visiting this url: %s', auth_url)

        message = ('Authorize this app by visiting this url: {}\n'
                   'Enter the code from that page here: '.format(auth_url))
        try:
            code = self.prompt(message)
        except EOFError:
            raise exceptions.InteractiveExchangeError('No authorization code was entered')

        code = (code or '').strip()
        if not code:
            raise exceptions.InteractiveExchangeError('No authorization code was entered')

        try:
            token = self.flow.fetch_token(code=code)
        except (OAuth2Error, RequestException, ValueError, Warning) as e:
            # oauthlib raises a Warning when the granted scopes differ from the requested ones
            msg = 'Error while trying to retrieve access token: {}'
            raise exceptions.InteractiveExchangeError(msg.format(e))

        token = dict(token)
        try:
            self._store_token(token)
        except exceptions.TokenWriteError:
            logger.exception('Continuing with a token that was not stored')

        return token
