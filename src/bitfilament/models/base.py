"""Pydantic model integration.

Pydantic models encode as objects (field name -> value, in field order). This
module provides a base class with encode/decode helpers and decode_model() for
validating a decoded object into any model class.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from structlog import get_logger

from ..codec.decoder import BufferInput, decode
from ..codec.encoder import encode
from ..config import CodecConfig
from ..exceptions import DecodeError

logger = get_logger()

M = TypeVar("M", bound=BaseModel)


def decode_model(
    model_class: type[M],
    data: BufferInput,
    offset: int = 0,
    *,
    config: CodecConfig | None = None,
) -> tuple[M, int]:
    """Decode an object at ``offset`` and validate it into ``model_class``.

    Args:
        model_class: Pydantic model class to validate into
        data: Encoded data
        offset: Position of the object's tag byte (default 0)
        config: Codec configuration

    Returns:
        Tuple of (model instance, offset just past the object)

    Raises:
        DecodeError: If the value is not an object or fails model validation
    """
    value, new_offset = decode(data, offset, config=config)
    if not isinstance(value, dict):
        raise DecodeError(
            f"Expected an object for {model_class.__name__}, got {type(value).__name__}"
        )

    try:
        return model_class.model_validate(value), new_offset
    except ValidationError as e:
        logger.debug('model validation failed', model=model_class.__name__, errors=e.error_count())
        raise DecodeError(f"Failed to construct {model_class.__name__}: {e}") from e


class FilamentModel(BaseModel):
    """Base class for models exchanged as encoded objects.

    Example:
        >>> class Reading(FilamentModel):
        ...     sensor: str
        ...     values: list[float]
        >>> data = Reading(sensor="t1", values=[20.5, 21.0]).to_filament()
        >>> reading, _ = Reading.from_filament(data)
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
    )

    def to_filament(self, *, config: CodecConfig | None = None) -> bytes:
        """Encode this model as an object."""
        return encode(self, config=config)

    @classmethod
    def from_filament(
        cls: type[M], data: BufferInput, offset: int = 0, *, config: CodecConfig | None = None
    ) -> tuple[M, int]:
        """Decode an object at ``offset`` into this model class."""
        return decode_model(cls, data, offset, config=config)
