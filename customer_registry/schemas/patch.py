from pydantic import BaseModel, Field
from typing import Any, Literal, Optional


class PatchOperation(BaseModel):
    """One entry of a JSON Patch document (RFC 6902)"""
    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str
    value: Optional[Any] = None
    from_: Optional[str] = Field(default=None, alias="from")

    class Config:
        populate_by_name = True
