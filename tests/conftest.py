"""Pytest configuration and fixtures."""

import pytest

from pathset.config.context import set_context, set_verbose


@pytest.fixture(autouse=True)
def reset_output_context():
    """Start and end every test with the default output context."""
    set_context(None)
    yield
    set_context(None)


@pytest.fixture
def project_tree(tmp_path):
    """
    Create a small build tree.

    tmp_path/
        build/
            app.js
            app.js.map
            vendor.js.map
            assets/
                logo.svg
        docs/
            guide.md
    """
    build = tmp_path / "build"
    (build / "assets").mkdir(parents=True)
    (build / "app.js").write_text("console.log('app');")
    (build / "app.js.map").write_text("{}")
    (build / "vendor.js.map").write_text("{}")
    (build / "assets" / "logo.svg").write_text("<svg/>")

    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text("# Guide")
    return tmp_path


@pytest.fixture
def quiet_console():
    """Console diagnostics disabled for the test."""
    set_verbose(False)
    yield
