"""
Linkable Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden in config/linkable.py or config/app.py
"""

# ============================================================================
# ROUTE DEFAULTS
# ============================================================================

DEFAULT_ACTION = 'view'
DEFAULT_ROUTE_SEPARATOR = '/'

# ============================================================================
# HOTLINK DEFAULTS
# ============================================================================

DEFAULT_USE_ABSOLUTE_URL = False
DEFAULT_HOTLINK_TAG = 'span'  # element used when hotlinking is disabled

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_APP_ENV = 'local'
