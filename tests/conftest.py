"""Pytest configuration and shared fixtures for docnorm test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import doc, heading, image, paragraph, text

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def sample_document() -> dict:
    """Provide an editor document exercising every normalization rule.

    Returns
    -------
    dict
        Decoded document with messy text, out-of-range headings, empty
        nodes and images with and without attrs.

    """
    return doc(
        heading(text("Getting   started"), attrs={"level": 9, "id": "intro"}),
        paragraph(
            text("Hello  ", marks=[{"type": "bold"}]),
            text(""),
            text("world\t\tagain"),
        ),
        paragraph(),
        heading(text("")),
        image({"src": "cat.png", "alt": None}),
        image(),
        {"type": "bulletList", "content": [{"type": "listItem", "content": [paragraph(text("  item  "))]}]},
    )


@pytest.fixture
def sample_document_formatted() -> dict:
    """Provide the canonical form of ``sample_document``."""
    return doc(
        {
            "type": "heading",
            "content": [text("Getting started")],
            "attrs": {"level": 6, "id": "intro"},
        },
        paragraph(
            text("Hello ", marks=[{"type": "bold"}]),
            text("world\t\tagain"),
        ),
        paragraph(),
        image({"src": "cat.png", "alt": None}),
        {"type": "bulletList", "content": [{"type": "listItem", "content": [paragraph(text(" item "))]}]},
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo CLI logging setup so caplog sees records in every test."""
    yield
    package_logger = logging.getLogger("docnorm")
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
