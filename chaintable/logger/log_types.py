from enum import Enum
from typing import Dict


class LogEvent(str, Enum):
    TABLE_CREATED = "table_created"
    TABLE_RESIZED = "table_resized"
    INVALID_ARGUMENT = "invalid_argument"
    KEY_INSERTED = "key_inserted"
    KEY_UPDATED = "key_updated"
    KEY_REMOVED = "key_removed"
    KEY_NOT_FOUND = "key_not_found"
    BAD_COMMAND = "bad_command"
    IO_ERROR = "io_error"
    MEMORY_USAGE = "memory_usage"


class TableLog(Dict):
    event: LogEvent
    capacity: int
    load_factor: float
    size: int


class ResizeLog(Dict):
    event: LogEvent
    old_capacity: int
    new_capacity: int
    size: int


class ErrorLog(Dict):
    event: LogEvent
    error: str
