"""
Field rules shared by the request models

Each annotated type below is one row of the per-entity rule table
(field -> required?, type, format check). Create models declare their fields
without defaults, so every field is required; update models inherit from
PartialUpdate, so only the fields present in the request are checked and
applied.

Rules:
    RequiredText   non-empty string (numbers are not coerced)
    CoverImageUrl  string holding a well-formed http(s) URL, stored as given
    Price          non-negative decimal, rounded to 2 places, fits numeric(8,2)
    Tags           list of strings, order preserved, may be empty
    Points         non-negative integer
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Any, Dict, List

from pydantic import (
    AfterValidator,
    BaseModel,
    Field,
    HttpUrl,
    StrictStr,
    TypeAdapter,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

PRICE_QUANTUM = Decimal("0.01")
MAX_PRICE = Decimal("999999.99")

_http_url = TypeAdapter(HttpUrl)


def check_cover_image_url(value: str) -> str:
    """Reject strings that are not http(s) URLs; valid values are stored as given"""
    try:
        _http_url.validate_python(value)
    except PydanticValidationError:
        raise ValueError("must be a valid URL")
    return value


def normalize_price(value: Decimal) -> Decimal:
    """Round to cents and make sure the amount fits numeric(8,2)"""
    # Range check first; quantize fails on values wider than the decimal context
    if value > MAX_PRICE + PRICE_QUANTUM / 2:
        raise ValueError(f"must not be greater than {MAX_PRICE}")
    rounded = value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if rounded > MAX_PRICE:
        raise ValueError(f"must not be greater than {MAX_PRICE}")
    return rounded


RequiredText = Annotated[StrictStr, Field(min_length=1)]
CoverImageUrl = Annotated[StrictStr, AfterValidator(check_cover_image_url)]
Price = Annotated[Decimal, Field(ge=0, allow_inf_nan=False), AfterValidator(normalize_price)]
Tags = List[StrictStr]
Points = Annotated[int, Field(ge=0)]


class PartialUpdate(BaseModel):
    """
    Base for update payloads.

    Every field is optional, but a field that is sent must hold a valid
    value: explicit nulls are rejected with a message on that field.
    """

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Only the fields supplied by the caller"""
        return self.model_dump(exclude_unset=True)
