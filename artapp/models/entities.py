from typing import Optional

from sqlmodel import Field, SQLModel


class Setting(SQLModel, table=True):
    """A single named slot in the local key-value settings store."""

    key: str = Field(primary_key=True, max_length=100)
    value: Optional[str] = Field(default=None, nullable=True)
