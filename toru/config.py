"""Global toru configuration. Override via environment variables."""

import os


def _flag(name, default=''):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Pipe run log. LOG_LIMIT < 0 means unbounded, 0 keeps no records
LOG_PREVIEW = int(os.environ.get('TORU_LOG_PREVIEW', '200'))
LOG_LIMIT = int(os.environ.get('TORU_LOG_LIMIT', '1000'))

# Print one line per stage when running a Pipe
VERBOSE = _flag('TORU_VERBOSE')
