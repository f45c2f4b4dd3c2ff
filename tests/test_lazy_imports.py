"""Tests for perch.__init__ — lazy imports cover all public names."""

import pytest

import perch


@pytest.mark.parametrize("name", perch.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(perch, name)
    assert obj is not None, f"perch.{name} resolved to None"


def test_version() -> None:
    assert perch.__version__ == "0.1.0"


def test_errors_are_shared() -> None:
    from perch.errors import ParameterError

    assert perch.ParameterError is ParameterError


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        perch.__getattr__("ThisDoesNotExist")
