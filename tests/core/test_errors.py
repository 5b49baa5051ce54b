from applykit.core.errors import (
    ApplyError,
    ElementError,
    InvalidShape,
    RecyclingWarning,
    TypeMismatch,
)


def test_element_error_message():
    cause = ZeroDivisionError("division by zero")
    error = ElementError(2, cause, label="c")
    assert error.index == 2
    assert error.label == "c"
    assert error.cause is cause
    assert "index 2 ('c')" in str(error)
    assert isinstance(error, ApplyError)


def test_error_hierarchy():
    assert issubclass(TypeMismatch, TypeError)
    assert issubclass(InvalidShape, ValueError)
    assert issubclass(RecyclingWarning, UserWarning)
    assert not issubclass(RecyclingWarning, ApplyError)


def test_recycling_warning_fields():
    warning = RecyclingWarning(1, 2, 5)
    assert (warning.container_index, warning.length, warning.longest) == (1, 2, 5)
    assert "5" in str(warning)
