"""pytestarch fixtures for the layer rules."""

import os

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Import graph of the nativehelper package."""
    src_dir = os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", "..", "src")
    )
    project_path = os.path.join(src_dir, "nativehelper")
    return get_evaluable_architecture(src_dir, project_path)


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """domain, application and infrastructure, named from the src root."""
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.nativehelper.domain"])
        .layer("application")
        .containing_modules(["src.nativehelper.application"])
        .layer("infrastructure")
        .containing_modules(["src.nativehelper.infrastructure"])
    )
