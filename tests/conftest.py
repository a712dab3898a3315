"""
Pytest configuration and shared fixtures for smithy tests.
"""

import pytest

from smithy.calculator import ThreadClass, uts_external_thread


@pytest.fixture(scope="module")
def quarter_20_2a():
    """1/4-20 UNC-2A, the general purpose reference thread."""
    return uts_external_thread(0.25, 20, ThreadClass.A2)


@pytest.fixture(scope="module")
def quarter_20_3a():
    """1/4-20 UNC-3A, precision class with no allowance."""
    return uts_external_thread(0.25, 20, ThreadClass.A3)


@pytest.fixture(scope="module")
def quarter_20_1a():
    """1/4-20 UNC-1A, loose fit."""
    return uts_external_thread(0.25, 20, ThreadClass.A1)


@pytest.fixture(params=list(ThreadClass), ids=lambda tc: tc.value)
def thread_class(request):
    """Each thread class in turn."""
    return request.param
