import os

import pytest

import sheetlines


@pytest.mark.usefixtures('clear_envvars')
def test_defaults():
    config = sheetlines.Config()
    assert config.credentials_path is None
    assert config.token_path == 'token.json'
    assert not config.has_credentials_file


@pytest.mark.usefixtures('clear_envvars')
def test_explicit_paths():
    config = sheetlines.Config(credentials_path='/tmp/secrets.json', token_path='/tmp/token.json')
    assert config.credentials_path == '/tmp/secrets.json'
    assert config.token_path == '/tmp/token.json'
    assert config.has_credentials_file


@pytest.mark.usefixtures('clear_envvars')
def test_envvars():
    os.environ['SHEETLINES_CREDENTIALS_PATH'] = '/etc/sheetlines/secrets.json'
    os.environ['SHEETLINES_TOKEN_PATH'] = '/etc/sheetlines/token.json'

    config = sheetlines.Config()
    assert config.credentials_path == '/etc/sheetlines/secrets.json'
    assert config.token_path == '/etc/sheetlines/token.json'


@pytest.mark.usefixtures('clear_envvars')
def test_explicit_paths_win_over_envvars():
    os.environ['SHEETLINES_TOKEN_PATH'] = '/etc/sheetlines/token.json'
    config = sheetlines.Config(token_path='my_token.json')
    assert config.token_path == 'my_token.json'


@pytest.mark.usefixtures('clear_envvars')
def test_paths_are_expanded():
    config = sheetlines.Config(credentials_path='~/secrets.json', token_path='~/token.json')
    assert config.credentials_path == os.path.expanduser('~/secrets.json')
    assert config.token_path == os.path.expanduser('~/token.json')


@pytest.mark.usefixtures('clear_envvars')
def test_repr():
    config = sheetlines.Config(token_path='token.json')
    assert repr(config) == ("<sheetlines.config.Config(credentials_path=None, "
                            "token_path='token.json')>")
