import json
from typing import Any, Generic, Mapping, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from valorant_api.errors import MalformedEnvelope


class ApiModel(BaseModel):
    """Base of every response object: immutable, unknown fields ignored."""
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)


T = TypeVar("T", bound=ApiModel)


class ApiError(ApiModel):
    message: StrictStr
    code: StrictInt
    details: StrictStr


class Success(ApiModel, Generic[T]):
    status: StrictInt
    data: T

    @property
    def ok(self) -> bool:
        return True


class Failure(ApiModel):
    status: StrictInt
    errors: list[ApiError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False


ResponseEnvelope = Union[Success[T], Failure]


def decode_envelope(raw: Any, payload_type: type[T]) -> "ResponseEnvelope[T]":
    """
    Decode a parsed JSON body into ``Success`` or ``Failure``.

    There is no discriminant field: ``data`` is tried first (only when
    ``errors`` is absent), then ``errors``. A body matching neither raises
    :class:`MalformedEnvelope`, chained to the validation error when there was one.
    """
    if not isinstance(raw, Mapping):
        raise MalformedEnvelope(f"ResponseEnvelope: expected a JSON object, got {type(raw).__name__}")

    data_error: ValidationError | None = None
    if "data" in raw and "errors" not in raw:
        try:
            return Success[payload_type].model_validate(raw)
        except ValidationError as e:
            data_error = e

    if "errors" in raw:
        try:
            return Failure.model_validate(raw)
        except ValidationError as e:
            raise MalformedEnvelope(f"ResponseEnvelope: invalid failure body: {e}") from e

    if data_error is not None:
        raise MalformedEnvelope(f"ResponseEnvelope: 'data' is not a valid {payload_type.__name__}: {data_error}") \
            from data_error
    raise MalformedEnvelope("ResponseEnvelope: neither 'data' nor 'errors' is present")


def decode_envelope_json(text: str | bytes, payload_type: type[T]) -> "ResponseEnvelope[T]":
    try:
        raw = json.loads(text)
    except ValueError as e:
        raise MalformedEnvelope(f"Response body is not valid JSON: {e}") from e
    return decode_envelope(raw, payload_type)
