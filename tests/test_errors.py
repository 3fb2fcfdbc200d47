import pytest

from cardlang.errors import (
    CompilationError,
    CompilationErrorKind,
    ExecutionError,
    ExecutionErrorKind,
)


def test_no_main_message():
    err = CompilationError(CompilationErrorKind.NO_MAIN)
    assert str(err) == "Entrypoint not found"
    assert err.loc is None


def test_location_is_prefixed():
    err = CompilationError(CompilationErrorKind.NO_MAIN, loc="0.1")
    assert str(err) == "CompilationError: [0.1], Error: Entrypoint not found"
    assert err.message == "Entrypoint not found"


def test_bad_function_name_is_quoted():
    err = CompilationError(CompilationErrorKind.BAD_FUNCTION_NAME, "foo bar")
    assert err.message == '"foo bar" is not a valid name for a Function'


def test_detail_is_included():
    err = CompilationError(CompilationErrorKind.DUPLICATE_MODULE, "main")
    assert err.message.startswith("Module names must be unique")
    assert err.message.endswith("main")
    assert err.details == ("main",)


def test_invalid_jump_optional_message():
    without = CompilationError(CompilationErrorKind.INVALID_JUMP, "foo", None)
    assert without.message.endswith("\nNone")
    with_msg = CompilationError(CompilationErrorKind.INVALID_JUMP, "foo", "reason")
    assert with_msg.message.endswith('\nSome("reason")')
    assert "foo" in with_msg.message


def test_compilation_error_wrong_arity():
    with pytest.raises(TypeError):
        CompilationError(CompilationErrorKind.NO_MAIN, "extra")
    with pytest.raises(TypeError):
        CompilationError(CompilationErrorKind.BAD_IMPORT)


def test_compilation_error_is_raisable():
    err = CompilationError(CompilationErrorKind.EMPTY_VARIABLE)
    assert err.kind is CompilationErrorKind.EMPTY_VARIABLE
    assert str(err) == "Variable name can't be empty"
    with pytest.raises(CompilationError, match="Variable name can't be empty"):
        raise err


def test_execution_error_display_prefix():
    err = ExecutionError(ExecutionErrorKind.TIMEOUT)
    assert str(err) == "ExecutionError: Program timed out"
    assert err.trace == []


def test_exit_code_message():
    err = ExecutionError(ExecutionErrorKind.EXIT_CODE, 3)
    assert err.message == "Program exited with status code: 3"


def test_invalid_argument_constructor():
    err = ExecutionError.invalid_argument("bad thing")
    assert err.kind is ExecutionErrorKind.INVALID_ARGUMENT
    assert err.message.endswith("bad thing")
    assert err.message.startswith("Got an invalid argument: ")


def test_invalid_argument_without_context():
    err = ExecutionError(ExecutionErrorKind.INVALID_ARGUMENT)
    assert err.message == "Got an invalid argument: "


def test_task_failure_embeds_inner_message():
    inner = ExecutionError(ExecutionErrorKind.OUT_OF_MEMORY)
    outer = ExecutionError(ExecutionErrorKind.TASK_FAILURE, "worker", inner)
    assert inner.message in outer.message
    assert "[worker]" in outer.message
    assert "ExecutionError:" not in outer.message


def test_trace_is_kept():
    err = ExecutionError(ExecutionErrorKind.MISSING_ARGUMENT, trace=["a", "b"])
    assert err.trace == ["a", "b"]


def test_execution_error_wrong_arity():
    with pytest.raises(TypeError):
        ExecutionError(ExecutionErrorKind.VAR_NOT_FOUND)