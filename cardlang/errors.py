"""Errors raised while compiling and running card programs."""

from __future__ import annotations

import enum
import string
from typing import Any, Optional


def _debug_str(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\0", "\\0")
    )
    return f'"{escaped}"'


def _debug_optional(text: Optional[str]) -> str:
    return "None" if text is None else f"Some({_debug_str(text)})"


def _arity(template: str) -> int:
    return sum(1 for _, name, _, _ in string.Formatter().parse(template) if name is not None)


class CompilationErrorKind(enum.Enum):
    """What went wrong during compilation; the value is the message template."""

    UNIMPLEMENTED = "The requested functionality ({0}) is not yet implemented"
    NO_MAIN = "Entrypoint not found"
    EMPTY_PROGRAM = "Program was empty"
    TOO_MANY_CARDS = (
        "Functions {0} has too many cards. Number of cards in a function may not be "
        "larger than 2^16 - 1 = 65535"
    )
    DUPLICATE_NAME = "Function names must be unique. Found duplicated name: {0}"
    DUPLICATE_MODULE = "Module names must be unique. Found duplicated name: {0}"
    MISSING_SUB_PROGRAM = "SubProgram: [{0}] was not found"
    INVALID_JUMP = "Jumping to {0} can not be performed\n{1}"
    INTERNAL_ERROR = "Internal failure during compilation"
    TOO_MANY_LOCALS = "Too many locals in scope"
    TOO_MANY_UPVALUES = "Too many upvalues in scope. Try capturing less variables"
    BAD_VARIABLE_NAME = "Variable name {0} can not be used"
    EMPTY_VARIABLE = "Variable name can't be empty"
    BAD_FUNCTION_NAME = "{0} is not a valid name for a Function"
    RECURSION_LIMIT_REACHED = "Recursion limit ({0}) reached"
    BAD_IMPORT = "Import '{0}' is not valid"
    AMBIGOUS_IMPORT = "Import '{0}' is ambigous"
    SUPER_LIMIT_REACHED = "Too many `super.` calls."


class CompilationError(Exception):
    """A program could not be compiled.

    ``details`` holds the values the message refers to; ``loc`` optionally
    tells where in the program the error was found.
    """

    def __init__(self, kind: CompilationErrorKind, *details: Any, loc: Any = None) -> None:
        if kind is CompilationErrorKind.INVALID_JUMP and len(details) == 1:
            details = (details[0], None)
        expected = _arity(kind.value)
        if len(details) != expected:
            raise TypeError(f"{kind.name} takes {expected} detail(s), got {len(details)}")
        self.kind = kind
        self.details = details
        self.loc = loc
        super().__init__(str(self))

    @property
    def message(self) -> str:
        """The message describing the error, without its location."""
        details = list(self.details)
        if self.kind is CompilationErrorKind.BAD_FUNCTION_NAME:
            details[0] = _debug_str(str(details[0]))
        elif self.kind is CompilationErrorKind.INVALID_JUMP:
            details[1] = _debug_optional(details[1])
        return self.kind.value.format(*details)

    def __str__(self) -> str:
        if self.loc is not None:
            return f"CompilationError: [{self.loc}], Error: {self.message}"
        return self.message


class ExecutionErrorKind(enum.Enum):
    """What went wrong while running; the value is the message template."""

    CALL_STACK_OVERFLOW = "The program has overflown its call stack"
    UNEXPECTED_END_OF_INPUT = "Input ended unexpectedly"
    EXIT_CODE = "Program exited with status code: {0}"
    INVALID_INSTRUCTION = "Got an invalid instruction code {0}"
    INVALID_ARGUMENT = "Got an invalid argument: {0}"
    VAR_NOT_FOUND = "Variable {0} was not found!"
    PROCEDURE_NOT_FOUND = "Procedure by the hash {0} could not be found"
    UNIMPLEMENTED = "Unimplemented"
    OUT_OF_MEMORY = "The program ran out of memory"
    MISSING_ARGUMENT = "Missing argument to function call"
    TIMEOUT = "Program timed out"
    TASK_FAILURE = "Subtask [{0}] failed {1}"
    STACKOVERFLOW = "The program has overflowns its stack"
    BAD_RETURN = "Failed to return from a function {0}"
    UNHASHABLE = "Trying to hash an unhashable object"
    ASSERTION_ERROR = "Assertion failed: {0}"
    INVALID_UPVALUE = "Closure requested a non-existent upvalue"
    NOT_CLOSURE = "Expected to be in the context of a closure"


class ExecutionError(Exception):
    """A program failed while running.

    ``trace`` holds the locations of the call stack at the time of failure.
    """

    def __init__(
        self, kind: ExecutionErrorKind, *details: Any, trace: Optional[list] = None
    ) -> None:
        if kind is ExecutionErrorKind.INVALID_ARGUMENT and not details:
            details = (None,)
        expected = _arity(kind.value)
        if len(details) != expected:
            raise TypeError(f"{kind.name} takes {expected} detail(s), got {len(details)}")
        self.kind = kind
        self.details = details
        self.trace = list(trace) if trace is not None else []
        super().__init__(str(self))

    @classmethod
    def invalid_argument(cls, reason: str) -> "ExecutionError":
        """An invalid-argument error carrying the given reason."""
        return cls(ExecutionErrorKind.INVALID_ARGUMENT, str(reason))

    @property
    def message(self) -> str:
        """The message describing the error."""
        details = list(self.details)
        if self.kind is ExecutionErrorKind.INVALID_ARGUMENT and details[0] is None:
            details[0] = ""
        elif self.kind is ExecutionErrorKind.TASK_FAILURE and isinstance(
            details[1], ExecutionError
        ):
            details[1] = details[1].message
        return self.kind.value.format(*details)

    def __str__(self) -> str:
        return f"ExecutionError: {self.message}"