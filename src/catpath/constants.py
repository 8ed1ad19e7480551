from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

import os

PROG_NAME: str = 'catpath'

# Separator used between directory paths when -s is not given.
DEFAULT_SEP: str = ':'

# Tokens starting with this prefix are rewritten when -x is active.
HOME_PREFIX: str = '~/'

# Only tokens starting with the root marker are existence-checked.
ROOT_MARKER: str = '/'

HOME_ENV_VARS: tuple = ('HOME', 'USERPROFILE') if os.name == 'nt' else ('HOME',)

ENV_JSON_LOGS: str = 'CATPATH_JSON_LOGS'
ENV_LOG_LEVEL: str = 'CATPATH_LOG_LEVEL'
ENV_TRACE_IO: str = 'CATPATH_TRACE_IO'
ENV_DEBUG: str = 'DEBUG'
