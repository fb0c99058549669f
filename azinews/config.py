import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """configuration class for environment variable"""

    # Logging
    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv('LOG_LEVEL', 'info')

    # Feed Fetching Settings
    @property
    def FEED_FETCH_TIMEOUT_SECONDS(self) -> float:
        return float(os.getenv('FEED_FETCH_TIMEOUT_SECONDS', '15'))


CONFIG = Config()


__all__ = ["CONFIG"]
