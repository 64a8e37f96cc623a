"""Exceptions raised by seodoctor."""

from __future__ import annotations


class SEODoctorError(Exception):
    """Base class for all seodoctor errors."""

    pass


class UnknownEntityTypeError(SEODoctorError, KeyError):
    """Raised when no field-validator configuration exists for an entity type."""

    def __init__(self, entity_type: str, known: list[str]) -> None:
        self.entity_type = entity_type
        self.known = known
        super().__init__(f"Unknown entity type '{entity_type}'. Known types: {', '.join(known)}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class ConfigurationError(SEODoctorError, ValueError):
    """Raised when an entity configuration cannot be scored."""

    pass


class InputError(SEODoctorError, ValueError):
    """Raised when entity input cannot be read or has the wrong shape."""

    pass
