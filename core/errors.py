"""Simulation errors with tracking IDs.

Two families: ``InputError`` means the caller must fix the request,
``InternalError`` means the simulator itself is broken. ``BoundaryViolation``
sits between them: the input was well formed, but the walk does not fit the grid.
"""

from utils.timestamp import format_timestamp
from utils.ksuid import generate_ksuid


class BaseSimError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    @property
    def message(self):
        return super().__str__()

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "id": self.error_id,
            "timestamp": self.timestamp,
            "message": self.message,
            "context": self.context,
        }


class InputError(BaseSimError):
    """Caller supplied something the simulator cannot accept."""


class InternalError(BaseSimError):
    """An invariant broke inside the simulator."""


class InvalidDirectionSymbol(InputError):
    """Direction glyph outside ^ > v <."""

    def __init__(self, glyph, **kwargs):
        context = kwargs.pop("context", {})
        context["glyph"] = glyph
        super().__init__(f"The ant direction must be one of: '^', '>', 'v', '<'; got {glyph!r}",
                         context=context, **kwargs)
        self.glyph = glyph


class InvalidRunParameters(InputError):
    """Grid size, start position or step count out of range."""

    def __init__(self, message, parameter=None, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if parameter:
            context["parameter"] = parameter
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
        self.parameter = parameter


class BoundaryViolation(BaseSimError):
    """The ant would step off the grid."""

    def __init__(self, position, attempted, direction, step=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(position=list(position), attempted=list(attempted), direction=direction.glyph)
        if step is not None:
            context["step"] = step
        where = f" on step {step}" if step is not None else ""
        super().__init__(f"The ant can not be moved from {tuple(position)} to {tuple(attempted)}{where} "
                         f"as it lies outside of the grid", context=context, **kwargs)
        self.position = tuple(position)
        self.attempted = tuple(attempted)
        self.direction = direction
        self.step = step


class CorruptedGridState(InternalError):
    """A grid cell holds neither WHITE nor BLACK."""

    def __init__(self, position, value, step=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(position=list(position), value=repr(value))
        if step is not None:
            context["step"] = step
        super().__init__(f"Cell at {tuple(position)} is neither '.' nor '#': {value!r}",
                         context=context, **kwargs)
        self.position = tuple(position)
        self.value = value
        self.step = step
