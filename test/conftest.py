"""
Shared pytest configuration and fixtures for the envguard tests.
"""

import io

import pytest

from envguard.registry import EnvRegistry, MappingEnvironment


@pytest.fixture
def environment():
    """In-memory environment with a few common variables."""
    return MappingEnvironment({
        'API_URL': 'https://api.example.com',
        'REQUEST_TIMEOUT': '30s',
        'STRIPE_API_KEY': 'sk_test_1234567890',
    })


@pytest.fixture
def diagnostics():
    """Stream receiving the frozen-violation report."""
    return io.StringIO()


@pytest.fixture
def registry(environment, diagnostics):
    """Fresh registry over the in-memory environment."""
    return EnvRegistry(environment=environment, diagnostic_stream=diagnostics)
