"""
Shared fixtures.

Every test runs inside its own arithmetic context, so memo tables built by
one test are never visible to another.
"""

import pytest

from surreals import local_context


@pytest.fixture(autouse=True)
def context():
    """A fresh ArithmeticContext, active for the duration of the test."""
    with local_context() as ctx:
        yield ctx
