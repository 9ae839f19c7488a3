"""
In-memory document tree: path resolution and enumeration over a nested
collection/document fixture.

Lookups never raise for a missing path. An absent collection is an empty
list and an absent document is None.
"""

from typing import Optional

from rulesim.schemas.dataset import Collection, Collections, Document, DocumentEntry


def split_path(path: str) -> tuple[str, str]:
    """Split "a/b/c" into ("a/b", "c"); a single segment has an empty parent."""
    parent, _, last = path.rpartition("/")
    return parent, last


def join_path(parent: str, name: str) -> str:
    return f"{parent}/{name}" if parent else name


class DocumentTree:
    """Read-only view over a Collections value."""

    def __init__(self, collections: Optional[Collections] = None):
        self.collections: Collections = collections if collections is not None else {}

    def get_collection(self, path: str) -> Collection:
        parent, name = split_path(path)

        if not parent:
            return self.collections.get(name, [])

        doc = self.get_document(parent)
        if doc is not None:
            return doc.collections.get(name, [])

        return []

    def get_document(self, path: str) -> Optional[Document]:
        collection_path, key = split_path(path)

        for doc in self.get_collection(collection_path):
            if doc.key == key:
                return doc
        return None

    def has_document(self, path: str) -> bool:
        return self.get_document(path) is not None

    def get_documents(
        self, collections: Optional[Collections] = None, parent_path: str = ""
    ) -> list[DocumentEntry]:
        """
        List every document under `collections` (the whole tree by default).

        Order is depth-first: each document comes right before the documents of
        its own sub-collections, collections in mapping order, documents in
        fixture order.
        """
        if collections is None:
            collections = self.collections

        entries: list[DocumentEntry] = []
        for collection_name, collection in collections.items():
            collection_path = join_path(parent_path, collection_name)
            for doc in collection:
                doc_path = join_path(collection_path, doc.key)
                entries.append(DocumentEntry(doc_path, doc))
                entries.extend(self.get_documents(doc.collections, doc_path))
        return entries
