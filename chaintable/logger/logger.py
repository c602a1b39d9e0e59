from chaintable.logger.log_types import LogEvent
import json
import logging

# Configured by the CLI through config.LOGGING; the library itself never configures it
logger = logging.getLogger('chaintable')


def log_table_event(event: LogEvent, capacity: int, load_factor: float, size: int):
    """Log a table-level event"""
    logger.info(json.dumps({
        "event": event,
        "capacity": capacity,
        "load_factor": load_factor,
        "size": size
    }))


def log_resize_event(event: LogEvent, old_capacity: int, new_capacity: int, size: int):
    """Log a rehash of the whole table into a bigger bucket array"""
    logger.info(json.dumps({
        "event": event,
        "old_capacity": old_capacity,
        "new_capacity": new_capacity,
        "size": size
    }))


def log_key_event(event: LogEvent, key: int, value: str = None):
    """Log a per-key event (with optional value)"""
    log_data = {
        "event": event,
        "key": key
    }
    if value is not None:
        log_data["value"] = value

    logger.debug(json.dumps(log_data))


def log_error_event(event: LogEvent, error: str, line: int = None):
    """Log an error event (with optional command line number)"""
    log_data = {
        "event": event,
        "error": error
    }
    if line is not None:
        log_data["line"] = line

    logger.error(json.dumps(log_data))


def log_memory_event(event: LogEvent, stage: str, rss_bytes: int):
    logger.info(json.dumps({
        "event": event,
        "stage": stage,
        "rss_mb": round(rss_bytes / 1e6, 2)
    }))
