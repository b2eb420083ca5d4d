import ast
import re
from setuptools import setup


def ensure_one_level_of_quotes(text):
    # Converts '"foo"' to 'foo'
    return str(ast.literal_eval(text))


def get_version():
    """ Based on the functionality in pallets/click's setup.py
    (https://github.com/pallets/click/blob/master/setup.py) """
    _version_re = re.compile(r'__version__\s+=\s+(.*)')
    with open('sheetlines/__init__.py', 'rb') as f:
        lines = f.read().decode('utf-8')
        version = ensure_one_level_of_quotes(_version_re.search(lines).group(1))
        return version


required = [
    'pandas',
    'numpy',
    'google-api-python-client>=2.0.0',
    'google-auth>=2.0.0',
    'google-auth-oauthlib>=1.0.0',
    'oauthlib>=3.0.0',  # installed by google-auth-oauthlib, but imported directly for its errors
    'requests',  # same, imported for its transport errors
]

test_required = [
    'httplib2',
    'pytest',
    'pytest-mock',
]

docs_required = [
    'sphinx',
    'sphinx_rtd_theme',
]

setup(
    name='sheetlines',
    description='Read rows of Google Sheets as records, edit them, and write them back from Python',
    version=get_version(),
    packages=['sheetlines'],
    install_requires=required,
    extras_require={'test': test_required, 'docs': docs_required},
    python_requires='>=3.7',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
