from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RemoteTask(BaseModel):
    """
    A task as returned by the API.

    ``category`` stays a plain string so rows from servers without
    categories (or with unknown ones) still render.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    completed: bool = False
    category: str = "personal"
    created_at: datetime | None = None
