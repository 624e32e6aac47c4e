"""Unit tests for short key generation in shortener.py.

Test coverage includes:
    1. Random key drawing
       - Keys have the requested length and match the route alphabet.
       - Invalid lengths raise ValueError.
    2. Free key generation
       - The first free candidate is returned.
       - Collisions are retried up to max_attempts, then KeyAllocationError is raised.
    3. Reverse index keys
"""

import re
from unittest.mock import MagicMock

import pytest
from pytest import MonkeyPatch

from kvshortener.constants import KEY_PATTERN
from kvshortener.dao.base import KeyValueStoreBaseDAO
from kvshortener.exceptions import KeyAllocationError
from kvshortener.utils import shortener
from kvshortener.utils.shortener import random_key, generate_key, reverse_index_key


# -------------------------------
# 1. Random key drawing
# -------------------------------


def test_random_key_matches_route_pattern():
    for _ in range(100):
        assert re.fullmatch(KEY_PATTERN, random_key())


@pytest.mark.parametrize('length', [1, 6, 12, 32])
def test_random_key_length(length):
    assert len(random_key(length)) == length


@pytest.mark.parametrize('length', [0, -1, 33])
def test_random_key_invalid_length(length):
    with pytest.raises(ValueError):
        random_key(length)


# -------------------------------
# 2. Free key generation
# -------------------------------


def test_generate_key_returns_free_candidate(monkeypatch: MonkeyPatch):
    store = MagicMock(spec=KeyValueStoreBaseDAO)
    store.get.side_effect = ['https://taken.example', None]
    monkeypatch.setattr(shortener, 'random_key', MagicMock(side_effect=['abc123', 'def456']))

    assert generate_key(store) == 'def456'
    assert store.get.call_count == 2


def test_generate_key_exhausts_attempts():
    store = MagicMock(spec=KeyValueStoreBaseDAO)
    store.get.return_value = 'https://taken.example'

    with pytest.raises(KeyAllocationError, match='after 4 attempts'):
        generate_key(store, max_attempts=4)

    assert store.get.call_count == 4


def test_generate_key_invalid_attempts():
    with pytest.raises(ValueError):
        generate_key(MagicMock(spec=KeyValueStoreBaseDAO), max_attempts=0)


# -------------------------------
# 3. Reverse index keys
# -------------------------------


def test_reverse_index_key():
    key = reverse_index_key('https://example.com')

    assert re.fullmatch(r'targets:[0-9a-f]{32}', key)
    assert key == reverse_index_key('https://example.com')
    assert key != reverse_index_key('https://example.org')
