"""Debug logging shared by the tracker and the host service."""
import datetime
from .config import DEBUG_MODE, DEBUG_LOG_PATH


def debug_log(message: str) -> None:
    """Write debug message to log file if debug mode is enabled."""
    if DEBUG_MODE:
        timestamp = datetime.datetime.now().isoformat(timespec='milliseconds')
        with open(DEBUG_LOG_PATH, 'a') as f:
            f.write(f"[{timestamp}] {message}\n")
