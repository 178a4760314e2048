import logging
from enum import Enum
from typing import Any, AsyncGenerator, ClassVar, List, Optional, Tuple, Type, TypeVar, Union

from google.cloud.firestore_v1 import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter
from google.cloud.firestore_v1.field_path import FieldPath
from pydantic import BaseModel, ConfigDict, Field

from .enums import FirestoreOperators
from .firestore_client import FirestoreDB
from .firestore_fields import FirestoreField


# Alias for the first element of a filter tuple
FieldType = Union[str, FirestoreField]
FilterType = Tuple[FieldType, Union[str, FirestoreOperators], Any]

ModelT = TypeVar("ModelT", bound="BaseFirestoreModel")

logger = logging.getLogger(__name__)


class BaseFirestoreModel(BaseModel):
    """
    Base document model for a top-level Firestore collection.

    The ``id`` field is the document key. It is supplied by the caller, is
    never written into the document body, and is restored from the snapshot
    on every read.
    """

    id: Optional[str] = Field(default=None)

    # Injected by ``init_firestore_odm``; shared by every request
    _db: ClassVar[Optional[FirestoreDB]] = None

    class Settings:
        name: str = "BaseCollection"  # Override in subclasses

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def initialize_fields(cls) -> None:
        for field_name, field_info in cls.model_fields.items():
            alias = (
                FieldPath.document_id() if field_name == "id"
                else (field_info.alias or field_name)
            )
            setattr(cls, field_name, FirestoreField(alias, attribute=field_name))

    @classmethod
    def initialize_db(cls, db: FirestoreDB):
        """
        Inject the FirestoreDB instance to be used for all operations.
        """
        cls._db = db

    @classmethod
    def get_collection_name(cls) -> str:
        if hasattr(cls, "Settings") and hasattr(cls.Settings, "name"):
            return str(cls.Settings.name)
        return cls.__name__

    @property
    def collection_name(self) -> str:
        return self.get_collection_name()

    @classmethod
    def _client(cls) -> AsyncClient:
        if cls._db is None:
            raise RuntimeError("Database must be initialized before using the model.")
        return cls._db.client

    @classmethod
    def _from_snapshot(cls: Type[ModelT], snapshot) -> ModelT:
        # Stored documents are taken as-is; a missing field reads as None
        data = snapshot.to_dict() or {}
        data["id"] = snapshot.id
        return cls.model_construct(**data)

    # --------------------------------------------------------------------------
    # Writes
    # --------------------------------------------------------------------------
    async def put(self: ModelT) -> ModelT:
        """
        Create or fully overwrite the document keyed by ``self.id``.

        Every declared field is written, ``None`` included, so a field left
        out of the model is cleared in the store rather than kept.
        """
        if not self.id:
            raise ValueError("Cannot write a document without an ID.")

        data_to_save = self.model_dump(exclude={"id"}, by_alias=True)
        doc_ref = self._client().collection(self.collection_name).document(self.id)

        logger.debug(f"Put: {self.collection_name} - id={self.id}, data={data_to_save}")
        await doc_ref.set(data_to_save)
        return self

    async def reload(self: ModelT) -> Optional[ModelT]:
        """
        Read the stored document back by id, ``None`` if it is not there.
        """
        if not self.id:
            raise ValueError("Cannot reload a document without an ID.")
        return await type(self).get(self.id)

    @classmethod
    async def delete_by_id(cls, doc_id: str) -> None:
        """
        Delete the document. Deleting a missing id is not an error.
        """
        doc_ref = cls._client().collection(cls.get_collection_name()).document(doc_id)
        logger.debug(f"Delete: {cls.get_collection_name()} - id={doc_id}")
        await doc_ref.delete()

    # --------------------------------------------------------------------------
    # Reads
    # --------------------------------------------------------------------------
    @classmethod
    async def get(cls: Type[ModelT], doc_id: str) -> Optional[ModelT]:
        """
        Retrieve a document by its ID, ``None`` when absent.
        """
        doc_ref = cls._client().collection(cls.get_collection_name()).document(doc_id)
        doc_snap = await doc_ref.get()

        if doc_snap.exists:
            return cls._from_snapshot(doc_snap)
        return None

    @classmethod
    async def find(
        cls: Type[ModelT],
        filters: Optional[List[FilterType]] = None,
    ) -> AsyncGenerator[ModelT, None]:
        """
        Stream every document matching all ``filters``.

        Order is whatever the store returns.
        """
        query = cls._build_query(cls._client(), filters=filters or [])
        async for doc in query.stream():
            yield cls._from_snapshot(doc)

    @classmethod
    async def find_all(cls: Type[ModelT], filters: Optional[List[FilterType]] = None) -> List[ModelT]:
        return [obj async for obj in cls.find(filters=filters)]

    @classmethod
    def _build_query(cls, db_client: AsyncClient, filters: List[FilterType]):
        query = db_client.collection(cls.get_collection_name())
        for (field_name, op, value) in filters:
            op_string = op.value if isinstance(op, Enum) else op
            query = query.where(filter=FieldFilter(str(field_name), op_string, value))
        return query
