import os

LOGZIO_API_KEY = os.getenv("logzIO_api_key")

# Check if we're in test mode
IS_TESTING = os.getenv("TESTING", "false").lower() == "true"

LOG_LEVEL = os.getenv("CHAINTABLE_LOG_LEVEL", "INFO").upper()

DEFAULT_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75

TEST_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
            'level': 'DEBUG'
        }
    },
    'loggers': {
        'chaintable': {
            'level': 'DEBUG',
            'handlers': ['null'],  # Use null handler to suppress logs during tests
            'propagate': False
        }
    }
}

CONSOLE_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s: %(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': LOG_LEVEL,
            'formatter': 'simple',
            'stream': 'ext://sys.stderr'
        }
    },
    'loggers': {
        'chaintable': {
            'level': 'DEBUG',
            'handlers': ['console'],
            'propagate': False
        }
    }
}

# Production logging configuration (logz.io)
PRODUCTION_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'logzioFormat': {
            'format': '%(message)s',
        }
    },
    'handlers': {
        'logzio': {
            'class': 'logzio.handler.LogzioHandler',
            'level': 'INFO',
            'formatter': 'logzioFormat',
            'token': LOGZIO_API_KEY,
            'logzio_type': 'chaintable-logs',
            'logs_drain_timeout': 5,
            'url': 'https://listener-eu.logz.io:8071',
            'retries_no': 4,
            'retry_timeout': 2,
        }
    },
    'loggers': {
        'chaintable': {
            'level': 'DEBUG',
            'handlers': ['logzio'],
            'propagate': False
        }
    }
}


def select_logging(is_testing=IS_TESTING, api_key=LOGZIO_API_KEY):
    if is_testing:
        return TEST_LOGGING
    if api_key:
        return PRODUCTION_LOGGING
    return CONSOLE_LOGGING


LOGGING = select_logging()
