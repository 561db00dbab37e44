"""Main settings file.

Settings are split into ``components`` shared by every environment and
one ``environments/<DJANGO_ENV>.py`` file. An optional
``environments/local.py`` overrides both for a single machine.
"""

from os import environ

from split_settings.tools import include, optional

# Managing environment via `DJANGO_ENV` variable:
environ.setdefault('DJANGO_ENV', 'development')
_ENV = environ['DJANGO_ENV']

_base_settings = (
    'components/common.py',
    'components/logging.py',
    'components/storages.py',
    'components/file_server.py',

    # Select the right env:
    'environments/{0}.py'.format(_ENV),

    # Optionally override some settings:
    optional('environments/local.py'),
)

include(*_base_settings)
