"""
conftest.py
-----------
Shared pytest fixtures for markup_validator tests.

Provides fixtures for:
- Stub processors and catalogs
- Sample configuration fragments
- YAML config files on disk
"""
import pytest
import yaml

from markup_validator.registry.processors import ProcessorCatalog, default_catalog
from markup_validator.validation.base import Processor, ValidationResult


class StubProcessor(Processor):
    """Processor that records what it was asked to validate."""

    def __init__(self, alias="stub", errors=None):
        self.alias = alias
        self.errors = list(errors or [])
        self.seen = []

    def process(self, markup):
        self.seen.append(markup)
        return ValidationResult(errors=list(self.errors))


# ----- Processor Fixtures -----

@pytest.fixture
def tidy_processor():
    """Processor registered as 'tidy'."""
    return StubProcessor("tidy")


@pytest.fixture
def w3c_processor():
    """Processor registered as 'w3c' that always reports an error."""
    return StubProcessor("w3c", errors=["Element 'blink' is obsolete"])


@pytest.fixture
def catalog(tidy_processor, w3c_processor):
    """Catalog knowing 'tidy' and 'w3c'."""
    catalog = ProcessorCatalog()
    catalog.register("tidy", tidy_processor)
    catalog.register("w3c", w3c_processor)
    return catalog


# ----- Configuration Fixtures -----

@pytest.fixture
def base_fragment():
    """Fragment defining two validators and a default."""
    return {
        "default_validator": "tidy",
        "validators": {
            "tidy": {"processor": "tidy"},
            "w3c": {"processor": "w3c", "timeout": 5},
        },
    }


@pytest.fixture
def write_yaml(tmp_path):
    """Write a mapping to a YAML file under tmp_path and return its path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_processor():
    """Factory for extra stub processors."""
    return StubProcessor


@pytest.fixture
def restore_default_catalog():
    """Drop aliases a test registers on the shared default catalog."""
    saved = dict(default_catalog._processors)
    yield default_catalog
    default_catalog._processors.clear()
    default_catalog._processors.update(saved)
