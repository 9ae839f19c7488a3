from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SetOperation(BaseModel):
    """Replace the document's fields wholesale (creates it when absent)."""
    model_config = ConfigDict(frozen=True)

    method: Literal["set"] = "set"
    document: str
    data: dict[str, Any]


class UpdateOperation(BaseModel):
    """Merge into existing fields; keys may be dotted paths like "a.b"."""
    model_config = ConfigDict(frozen=True)

    method: Literal["update"] = "update"
    document: str
    data: dict[str, Any]


class DeleteOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: Literal["delete"] = "delete"
    document: str


BatchOperation = Annotated[
    Union[SetOperation, UpdateOperation, DeleteOperation],
    Field(discriminator="method"),
]
