"""
Configuration for Postcode Address Resolver v1.0
"""
import os
import sys


def get_base_path():
    """Base path for data, cache and logs (EXE or Python)"""
    override = os.environ.get('ADDRESS_RESOLVER_HOME')
    if override:
        return os.path.abspath(override)
    if getattr(sys, 'frozen', False):
        # Frozen build - folder of the executable
        return os.path.dirname(sys.executable)
    else:
        # Python script
        return os.path.dirname(os.path.abspath(__file__))


# Base path
BASE_PATH = get_base_path()

# Paths
PROJECT_ROOT = BASE_PATH
DATA_DIR = os.path.join(BASE_PATH, 'data')
CACHE_DIR = os.path.join(BASE_PATH, 'cache')
LOGS_DIR = os.path.join(BASE_PATH, 'logs')
COLUMN_MAPPINGS_DIR = os.path.join(BASE_PATH, 'column_mappings')

# ==================== ADDRESS SOURCES ====================
# Flat files are named after the normalized postcode: data/po52hx.json
FLAT_FILE_EXTENSION = '.json'

# Ideal Postcodes lookup API
IDEAL_POSTCODES_URL = 'https://api.ideal-postcodes.co.uk/v1'
IDEAL_POSTCODES_API_KEY = os.environ.get('IDEAL_POSTCODES_API_KEY', '')
LOOKUP_TIMEOUT = 10  # seconds

# Lookup cache (remote responses only)
ENABLE_LOOKUP_CACHE = True
LOOKUP_CACHE_PATH = os.path.join(CACHE_DIR, 'lookup_cache.json')
CACHE_EXPIRY_DAYS = 30

# ==================== SCORING ====================
PRIMARY_TOKEN_WEIGHT = 2   # token also found in building number/name/sub-building
GENERAL_TOKEN_WEIGHT = 1

# Resolution statuses
STATUS_MATCH = 'match'
STATUS_AMBIGUOUS = 'ambiguous'
STATUS_NONE = 'none'
STATUS_ERROR = 'error'

# ==================== BATCH ====================
# Address field -> spreadsheet columns (several columns are joined with a space)
DEFAULT_COLUMN_MAPPING = {
    'line_1': ['line_1'],
    'line_2': ['line_2'],
    'line_3': ['line_3'],
    'building_number': ['building_number'],
    'building_name': ['building_name'],
    'sub_building_name': ['sub_building_name'],
    'postcode': ['postcode'],
}

RESULT_STATUS_COLUMN = 'match_status'
RESULT_SCORE_COLUMN = 'match_score'
RESULT_ADDRESS_COLUMN = 'matched_address'
RESULT_FIELD_PREFIX = 'matched_'

# Logging
LOG_FILE = os.path.join(LOGS_DIR, 'app.log')
LOG_LEVEL = os.environ.get('ADDRESS_RESOLVER_LOG_LEVEL', 'INFO')  # DEBUG, INFO, WARNING, ERROR
LOG_TO_FILE = os.environ.get('ADDRESS_RESOLVER_LOG_TO_FILE', '1') == '1'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
