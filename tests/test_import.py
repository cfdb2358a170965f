"""Verify package imports work correctly."""


def test_import_pizarra() -> None:
    """Test that pizarra can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import pizarra

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert pizarra.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from pizarra import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    """Everything in __all__ is importable from the package root."""
    import pizarra

    for name in pizarra.__all__:
        assert hasattr(pizarra, name), name
