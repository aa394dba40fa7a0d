"""
Stores constant values used across the library.
"""

from __future__ import annotations

# every config file is named config.<extension> unless a full path is given
CONFIG_FILE_STEM = "config"

# rotating log file kept next to the config file
LOG_FILE_NAME = "prefstore.log"
LOG_MAX_BYTES = 512_000
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# ini section holding top-level scalar values
INI_ROOT_SECTION = "DEFAULT"

# used when no application name can be determined
FALLBACK_APP_NAME = "python"
