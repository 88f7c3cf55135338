import logging
import time
from functools import wraps

logger = logging.getLogger("partdb_scanner")


def timer(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        end_time = time.time()
        execution_time = (end_time - start_time) * 1000
        logger.debug(f"Function '{func.__name__}' took {execution_time:.2f} ms to execute")
        return result

    return wrapper
