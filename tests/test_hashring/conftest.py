"""
Test configuration and fixtures for the hash ring tests.
"""

import os
import sys
import tempfile
import logging

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from hashring import ConsistentHashRing, RingConfig

# Configure test logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

SERVERS = [f"server{i}" for i in range(1, 7)]


@pytest.fixture
def ring():
    """Provide an empty ring with default settings"""
    return ConsistentHashRing()


@pytest.fixture
def populated_ring():
    """Provide a ring holding server1..server6"""
    ring = ConsistentHashRing()
    for server in SERVERS:
        ring.add(server)
    return ring


@pytest.fixture
def small_ring_config():
    """Ring settings with few replicas, for tests that inspect positions"""
    return RingConfig(replicas=3, spread_multiplier=7, initial_replica_index=0)


@pytest.fixture
def temp_directory():
    """Provide a temporary directory for tests"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir
