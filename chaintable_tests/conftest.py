import pytest
import os
from unittest.mock import patch, MagicMock

os.environ['TESTING'] = 'true'

from chaintable.hash_table import HashTable


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('chaintable.logger.logger.logger') as mock_logger:
        mock_logger.info = MagicMock()
        mock_logger.debug = MagicMock()
        mock_logger.error = MagicMock()
        yield mock_logger


@pytest.fixture
def table():
    return HashTable(10, 0.75)


@pytest.fixture
def modulo_hash():
    def _hash(key, bucket_count):
        return key % bucket_count
    return _hash


@pytest.fixture
def sample_entries():
    return {
        1: "one",
        2: "two",
        17: "seventeen",
        -5: "minus five",
        1024: "kilo",
        99999: "big",
    }


@pytest.fixture
def invalid_constructor_args():
    return [
        (0, 0.5),
        (-3, 0.5),
        (5, 0.0),
        (5, -0.1),
        (5, 1.01),
        (5, float("nan")),
        (2.5, 0.5),
        (True, 0.5),
        (5, "0.5"),
    ]
