"""Test that the package is properly structured."""

from folioview import __version__


def test_version():
    """Test that version is defined."""
    assert __version__ == "0.1.0"


def test_package_import():
    """Test that all subpackages are importable."""
    import folioview.cli
    import folioview.core
    import folioview.dashboard
    import folioview.models

    # All imports should succeed
    assert folioview.models is not None
    assert folioview.dashboard is not None
    assert folioview.core is not None
    assert folioview.cli is not None
