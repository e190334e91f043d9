"""Exceptions raised by the sampling and weighting protocol."""


class SamplingError(Exception):
    """Base class for all protocol errors."""


class InvalidInputTypeError(SamplingError, TypeError):
    """The sample's structure does not match what the distribution produces."""


class InvalidInputError(SamplingError, ValueError):
    """The sample is well-typed but not acceptable to the distribution."""


class MissingCapabilityError(SamplingError, TypeError):
    """A distribution class does not implement a required interface member."""

    def __init__(self, cls: type, missing):
        self.cls = cls
        self.missing = tuple(sorted(missing))
        super().__init__(
            f"{cls.__name__} cannot be instantiated, missing required "
            f"capabilities: {', '.join(self.missing)}"
        )
