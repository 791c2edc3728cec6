"""Fixed values shared by the installer.

These constants define the alphabets, locations and choice lists the wizard
relies on. Paths are relative to the Shlink project directory.
"""

import string

# =============================================================================
# Generated values
# =============================================================================

# Alphabet used to build short codes. Ambiguous glyphs (0, 1, a, e, i, l, o, u
# and their upper-case forms) are left out on purpose.
DEFAULT_SHORTCODE_CHARS = "123456789bcdfghjkmnpqrstvwxyzBCDFGHJKLMNPQRSTVWXYZ"

SECRET_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
SECRET_LENGTH = 32

# =============================================================================
# Choice lists (first entry is the default)
# =============================================================================

SUPPORTED_LANGUAGES = ["en", "es"]
URL_SCHEMAS = ["http", "https"]

# =============================================================================
# Project paths
# =============================================================================

SQLITE_DATABASE_PATH = "data/database.sqlite"
CACHED_CONFIG_PATH = "data/cache/app_config.php"
GENERATED_CONFIG_PATH = "config/params/generated_config.yml"

# =============================================================================
# Driver options
# =============================================================================

# PDO::MYSQL_ATTR_INIT_COMMAND
MYSQL_ATTR_INIT_COMMAND = 1002
MYSQL_INIT_COMMAND = "SET NAMES utf8"
