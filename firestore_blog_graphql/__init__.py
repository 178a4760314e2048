from typing import List, Type

from .firestore_model import BaseFirestoreModel
from .firestore_fields import FirestoreField
from .firestore_client import FirestoreDB
from .documents import CommentDocument, DOCUMENT_MODELS, PostDocument, UserDocument
from .enums import Collections, FirestoreOperators
from .errors import NotFoundError, OperationError


def init_firestore_odm(database: FirestoreDB, document_models: List[Type[BaseFirestoreModel]]):
    for model in document_models:
        model.initialize_db(database)
        model.initialize_fields()


__all__ = [
    "BaseFirestoreModel",
    "FirestoreField",
    "FirestoreDB",
    "Collections",
    "FirestoreOperators",
    "UserDocument",
    "PostDocument",
    "CommentDocument",
    "DOCUMENT_MODELS",
    "NotFoundError",
    "OperationError",
    "init_firestore_odm",
]
