"""Exception taxonomy raised by the terror package."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class TerrorError(Exception):
    """Base error type for error-object construction and decoding failures."""

    message: str

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.message


@dataclass(eq=False)
class DetailSerializationError(TerrorError):
    """A detail value has no representation in the wire document format."""

    key: str


@dataclass(eq=False)
class BuilderConsumedError(TerrorError):
    """A builder value was used after it had been consumed."""


@dataclass(eq=False)
class CapabilityDisabledError(TerrorError):
    """An operation belonging to a disabled capability was invoked."""

    capability: str


@dataclass(frozen=True, slots=True)
class DecodeProblem:
    """One violated field expectation found while decoding a document."""

    field: str
    expectation: str


@dataclass(eq=False)
class ErrorDecodeError(TerrorError):
    """A received document could not be decoded into an error object."""

    problems: tuple[DecodeProblem, ...] = ()

    @property
    def fields(self) -> tuple[str, ...]:
        """Return the field paths that failed validation."""
        return tuple(problem.field for problem in self.problems)


def decode_error(problems: tuple[DecodeProblem, ...]) -> ErrorDecodeError:
    """Build an ``ErrorDecodeError`` whose message lists every problem."""
    summary = "; ".join(f"{item.field}: {item.expectation}" for item in problems)
    return ErrorDecodeError(
        message=f"invalid error document ({summary})",
        problems=problems,
    )
