"""Base class for decoded console records."""

from pydantic import BaseModel, ConfigDict


class ConsoleRecord(BaseModel):
    """Immutable record decoded from camelCase console JSON.

    Fields are declared in snake_case with camelCase aliases, so ``model_dump()``
    yields the attribute names the data sources expose.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
