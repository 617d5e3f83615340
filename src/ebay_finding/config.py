"""
Configuration settings for the eBay Finding client
"""
import os
import logging
from typing import Dict
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

FINDING_API_URL = "http://svcs.ebay.com/services/search/FindingService/v1"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or incomplete"""
    pass


def _key(name: str, suffix: str) -> str:
    """Environment variable name for an optional application key suffix"""
    return f"{name}_{suffix}" if suffix else name


class Config:
    """eBay Finding API configuration"""

    def __init__(self, suffix: str = ""):
        self.suffix = suffix

        # Application id (SECURITY-APPNAME); EBAY_APP_ID_<suffix> for extra keys
        self.ebay_app_id = os.getenv(_key('EBAY_APP_ID', suffix))

        # API Endpoints
        self.ebay_finding_api_url = os.getenv('EBAY_FINDING_API_URL', FINDING_API_URL)

    def validate(self):
        """Validate required configuration"""
        if not self.ebay_app_id:
            raise ConfigurationError(f"{_key('EBAY_APP_ID', self.suffix)} not set")


# Configuration instances, one per key suffix
_config: Dict[str, Config] = {}


def get_config(suffix: str = "") -> Config:
    """Get the configuration instance for the given key suffix"""
    if suffix not in _config:
        logger.debug(f"Loading eBay configuration (suffix={suffix!r})")
        _config[suffix] = Config(suffix)
    return _config[suffix]
