"""Base schemas for engine value objects."""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Value objects are frozen: equality is structural and instances are
    hashable, so they can be shared between threads and used as dict keys.
    """

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )


class ErrorDetail(BaseModel):
    """Error detail schema."""

    code: str
    message: str
