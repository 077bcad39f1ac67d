# orphanage_care/repos/store.py
"""Generic access to one MongoDB collection.

A ``RecordStore`` knows the schema of the documents it holds (a pydantic
model) and which of their fields carry a unique index. Directories build
on top of it; they never talk to Motor directly.
"""
from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, List, Optional, Sequence, Type

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as SchemaError
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from orphanage_care.core.errors import DuplicateKey, MalformedId, ValidationError
from orphanage_care.schemas import COERCE

logger = logging.getLogger(__name__)


def _oid(id_str: str) -> ObjectId:
    try:
        return ObjectId(id_str)
    except (InvalidId, TypeError):
        raise MalformedId(f'Cast to ObjectId failed for value "{id_str}"')


def _describe(err: SchemaError, field: Optional[str] = None) -> str:
    parts = []
    for e in err.errors():
        path = field or ".".join(str(p) for p in e["loc"]) or "value"
        if e["type"] in ("missing", "string_too_short"):
            parts.append(f"{path}: Path `{path}` is required.")
        else:
            parts.append(f"{path}: {e['msg']}")
    return ", ".join(parts)


def serialize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Stored document -> JSON-safe dict (``_id`` as a string)."""
    if doc is None:
        return None
    return {**doc, "_id": str(doc["_id"])}


class RecordStore:
    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        collection: str,
        schema: Type[BaseModel],
        unique: Sequence[str] = (),
    ):
        self.name = collection
        self.col = db[collection]
        self.schema = schema
        self.unique = tuple(unique)

    async def ensure_indexes(self) -> None:
        # create_index is a no-op when an identical index already exists
        for field in self.unique:
            await self.col.create_index([(field, ASCENDING)], name=f"{field}_1", unique=True)

    # ---------- validation ----------
    def _check_object(self, fields: Any) -> None:
        if not isinstance(fields, dict):
            raise ValidationError(f"{self.name} validation failed: expected an object")

    def validate(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Full document: every declared field present, values coerced, extras dropped."""
        self._check_object(fields)
        try:
            return self.schema.model_validate(fields).model_dump()
        except SchemaError as exc:
            raise ValidationError(f"{self.name} validation failed: {_describe(exc)}") from exc

    def validate_partial(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Only the supplied declared fields, coerced one by one."""
        self._check_object(fields)
        out: Dict[str, Any] = {}
        for name, value in fields.items():
            info = self.schema.model_fields.get(name)
            if info is None:
                continue
            # keep the field constraints (e.g. non-blank strings), not just the bare type
            tp = Annotated[(info.annotation, *info.metadata)] if info.metadata else info.annotation
            try:
                out[name] = TypeAdapter(tp, config=COERCE).validate_python(value)
            except SchemaError as exc:
                raise ValidationError(
                    f"{self.name} validation failed: {_describe(exc, name)}"
                ) from exc
        return out

    # ---------- operations ----------
    async def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        doc = self.validate(fields)
        try:
            res = await self.col.insert_one(doc)
        except DuplicateKeyError as exc:
            raise DuplicateKey(f"E11000 duplicate key error collection: {self.name}: {exc}") from exc
        doc["_id"] = res.inserted_id
        logger.debug("inserted %s into %s", res.inserted_id, self.name)
        return doc

    async def find_one(self, filter_: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self.col.find_one(filter_)

    async def find_by_id(self, id_str: str) -> Optional[Dict[str, Any]]:
        return await self.col.find_one({"_id": _oid(id_str)})

    async def find_all(self, projection: Optional[List[str]] = None) -> List[Dict[str, Any]]:
        fields = {f: 1 for f in projection} if projection else None
        cur = self.col.find({}, fields)
        return [d async for d in cur]

    async def find_and_replace(
        self, filter_: Dict[str, Any], new_fields: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Replace the supplied fields of the first match; filter keys are kept as they are."""
        changes = self.validate_partial(new_fields)
        for key in filter_:
            changes.pop(key, None)
        if not changes:
            return await self.find_one(filter_)
        try:
            return await self.col.find_one_and_update(
                filter_, {"$set": changes}, return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError as exc:
            raise DuplicateKey(f"E11000 duplicate key error collection: {self.name}: {exc}") from exc
