"""Unit tests for error hierarchy."""

from pitu.core.errors import (
    ConfigError,
    DuplicateNodeError,
    FlowError,
    PituError,
    UnknownNodeError,
)


def test_pitu_error_is_base_exception():
    """
    GIVEN PituError
    WHEN verified
    THEN it is a subclass of Exception
    """
    assert issubclass(PituError, Exception)


def test_error_hierarchy():
    """
    GIVEN specific errors
    WHEN verified
    THEN they inherit from correct parents
    """
    assert issubclass(ConfigError, PituError)
    assert issubclass(FlowError, PituError)
    assert issubclass(UnknownNodeError, FlowError)
    assert issubclass(DuplicateNodeError, FlowError)


def test_node_errors_carry_node_id():
    err = UnknownNodeError("main.missing")
    assert err.node_id == "main.missing"
    assert str(err) == "Unknown node: main.missing"

    dup = DuplicateNodeError("main.welcome")
    assert dup.node_id == "main.welcome"
    assert "main.welcome" in str(dup)
