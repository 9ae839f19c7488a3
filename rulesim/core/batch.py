"""Factories for the write operations of a simulated batch commit."""

from typing import Any

from rulesim.schemas.batch import DeleteOperation, SetOperation, UpdateOperation


def make_set(document: str, data: dict[str, Any]) -> SetOperation:
    return SetOperation(document=document, data=data)


def make_update(document: str, data: dict[str, Any]) -> UpdateOperation:
    return UpdateOperation(document=document, data=data)


def make_delete(document: str) -> DeleteOperation:
    return DeleteOperation(document=document)
