"""
The Google Sheets resource is replaced by MagicMocks throughout the tests: the `sheets_svc`
fixture stands in for ``apiclient.discovery.build('sheets', 'v4', ...).spreadsheets()``, so calls
such as ``sheets_svc.values().update(...).execute()`` can be configured and asserted on without
any network access.
"""
import json
import os

import apiclient
import httplib2
import pytest

import sheetlines


def build_http_error(status=400, message='Unable to parse range: flib!A1'):
    content = json.dumps({'error': {'code': status, 'message': message}}).encode()
    return apiclient.errors.HttpError(
        resp=httplib2.Response({'status': str(status)}),
        content=content,
        uri='https://sheets.googleapis.com/v4/spreadsheets/xyz1234/values:batchGet?alt=json'
    )


@pytest.fixture
def clear_envvars():
    """
    Remove all environmental variables that have SHEETLINES in them, both before and after the
    test, so that a developer's real settings neither leak into tests nor get clobbered by them.
    """
    def clear():
        for key in list(os.environ.keys()):
            if 'SHEETLINES' in key:
                del os.environ[key]

    clear()
    yield
    clear()


@pytest.fixture
def sheets_svc(mocker):
    return mocker.MagicMock()


@pytest.fixture
def value_range():
    return {
        'range': 'People!A1:C4',
        'majorDimension': 'ROWS',
        'values': [
            ['name', 'age', 'city'],
            ['Ana', '30', 'Lisbon'],
            ['Bo', '41'],
            ['Cy', '27', 'Oslo'],
        ]
    }


@pytest.fixture
def mock_range(sheets_svc, value_range):
    return sheetlines.Range('xyz1234', 'People!A1:C4', value_range, sheets_svc)


@pytest.fixture
def client_secrets(tmpdir):
    file_path = tmpdir.join('client_secrets.json')
    file_path.write(json.dumps({
        'installed': {
            'client_id': '562803761647-1lj6fdt4rk27qde3f61slphbqcr9mieh.apps.googleusercontent.com',
            'project_id': 'sheetlines-test',
            'auth_uri': 'https://accounts.google.com/o/oauth2/auth',
            'token_uri': 'https://oauth2.googleapis.com/token',
            'client_secret': 'yMWIX9SijX-nUgvFGqkzoSBb',
            'redirect_uris': ['urn:ietf:wg:oauth:2.0:oob', 'http://localhost'],
        }
    }))
    return file_path.strpath


@pytest.fixture
def stored_token(tmpdir):
    file_path = tmpdir.join('token.json')
    file_path.write(json.dumps({
        'access_token': 'ya29.GlycBQBd0i9bxu2F1DZ4kPhk4ahwcayAVNEzo1aLFcLVIRFevIJXCvG7WtKDT7jX3',
        'refresh_token': '1//0gLqSMUpf8x1YCgYIARAAGBASNwF',
        'token_type': 'Bearer',
        'expires_in': 3599,
        'scope': ['https://www.googleapis.com/auth/spreadsheets'],
        'expires_at': 1523599737.5,
    }))
    return file_path.strpath


@pytest.fixture
def mock_client(mocker, tmpdir):
    client = sheetlines.Client(token_path=tmpdir.join('token.json').strpath)
    client.credentials = mocker.sentinel.credentials
    client.sheets_svc = mocker.MagicMock()
    return client
