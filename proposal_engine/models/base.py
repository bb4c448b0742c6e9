"""Shared model configuration and field types."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from proposal_engine.core.dates import to_datetime


# Dates are stored as aware UTC datetimes; ISO strings from a snapshot are re-hydrated.
UtcDatetime = Annotated[datetime, BeforeValidator(to_datetime)]


class EngineModel(BaseModel):
    """Base model: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
