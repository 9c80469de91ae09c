import logging
import os
from dotenv import load_dotenv
from enums import StoreBackendEnum

load_dotenv() #read a local .env file (if there is one) into the environment before looking anything up

logger = logging.getLogger(__name__)

def _float_setting(name: str, default: float) -> float:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw_value, default)
        return default

def _backend_setting(name: str, default: StoreBackendEnum) -> StoreBackendEnum:
    raw_value = os.getenv(name, default.value)
    try:
        return StoreBackendEnum(raw_value.lower())
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw_value, default.value)
        return default

STORE_BACKEND = _backend_setting("DASHBOARD_STORE_BACKEND", StoreBackendEnum.memory) #memory keeps everything in process, sql goes through DATABASE_URL
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///database.db")
SESSION_FILE = os.getenv("DASHBOARD_SESSION_FILE", "session.json") #durable slot for the logged in user
SIMULATED_LATENCY = _float_setting("DASHBOARD_SIMULATED_LATENCY", 0.0) #seconds auth calls wait to mimic a network round trip
LOG_LEVEL = os.getenv("DASHBOARD_LOG_LEVEL", "INFO").upper()
