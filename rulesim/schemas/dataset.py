from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Document(BaseModel):
    key: str
    fields: dict[str, Any] = Field(default_factory=dict)
    collections: dict[str, list["Document"]] = Field(default_factory=dict)


Collection = list[Document]
Collections = dict[str, Collection]

_collections_adapter = TypeAdapter(Collections)


def parse_collections(data: Any) -> Collections:
    """Validate raw fixture data (as loaded from JSON) into a Collections tree.

    Documents that are already `Document` instances are kept as-is.
    """
    return _collections_adapter.validate_python(data or {})


class DocumentEntry(NamedTuple):
    path: str
    doc: Document


class Credential(BaseModel):
    """Service-account key, as downloaded from the Firebase console."""
    model_config = ConfigDict(extra="allow")

    project_id: str
    client_email: str
    private_key: str
    private_key_id: Optional[str] = None
    client_id: Optional[str] = None
    token_uri: Optional[str] = None
