"""Shared model configuration for job board records."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Timestamps are always compared and stored in UTC
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """Base model: snake_case attributes, camelCase keys on the wire and in the store."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_record(self) -> dict:
        """Serialize to the JSON-compatible, alias-keyed shape kept in the store."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
