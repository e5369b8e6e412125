import logging

logger = logging.getLogger("appsec")

def log_operation(name: str):
    logger.debug("appsec SDK · %s", name)

def log_request(method: str, url: str):
    logger.debug("appsec SDK → %s %s", method, url)

def log_response(status: int, url: str, elapsed_ms: float):
    logger.debug("appsec SDK ← %d %s (%.0fms)", status, url, elapsed_ms)
