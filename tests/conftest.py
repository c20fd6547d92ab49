"""Pytest configuration for webmutate."""
import os

import pytest

from webmutate.config import MutateConfig, reset_config, set_config
from webmutate.filler import InputFiller
from webmutate.mutate.engine import MutationEngine
from webmutate.vectors import FormVector, LinkVector


def pytest_configure():
    # Keep the audit policy deterministic regardless of the developer's shell.
    os.environ.pop("WEBMUTATE_AUDIT_BOTH_METHODS", None)


@pytest.fixture(autouse=True)
def default_config():
    set_config(MutateConfig())
    yield
    reset_config()


@pytest.fixture
def link():
    return LinkVector.from_url("http://target.local/search?a=1&b=2")


@pytest.fixture
def form():
    return FormVector("http://target.local/login", {"a": "1", "b": "2"}, method="POST")


@pytest.fixture
def engine():
    return MutationEngine(filler=InputFiller(), both_methods=lambda: False)
