"""Tests for sitepack.__init__ — lazy imports cover all public names."""

import pytest

import sitepack


@pytest.mark.parametrize("name", sitepack.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(sitepack, name)
    assert obj is not None, f"sitepack.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        sitepack.__getattr__("ThisDoesNotExist")


def test_version() -> None:
    assert isinstance(sitepack.__version__, str)
