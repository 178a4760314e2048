"""
Root operation handlers shared by every entity.

Add and Update are the same operation: a full overwrite keyed by the caller's
id followed by a read of the same document. The write and the read are two
separate store calls, so a concurrent writer can be observed in between.
"""

import logging
from typing import Any, Dict, List, Type, TypeVar

from ..errors import NotFoundError, OperationError, store_operation
from ..firestore_model import BaseFirestoreModel

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=BaseFirestoreModel)


def _label(model: Type[BaseFirestoreModel]) -> str:
    return getattr(model.Settings, "label", model.__name__)


@store_operation
async def get_document(model: Type[DocumentT], doc_id: str) -> DocumentT:
    document = await model.get(doc_id)
    if document is None:
        raise NotFoundError(f"{_label(model)} ID not found")
    return document


@store_operation
async def list_documents(model: Type[DocumentT]) -> List[DocumentT]:
    return await model.find_all()


@store_operation
async def put_document(model: Type[DocumentT], fields: Dict[str, Any]) -> DocumentT:
    document = model(**fields)
    await document.put()

    stored = await document.reload()
    if stored is None:
        raise OperationError(
            f"{_label(model)} with ID: {document.id} was written but could not be read back"
        )
    logger.info(f"Stored {_label(model)} {stored.id}")
    return stored


@store_operation
async def delete_document(model: Type[BaseFirestoreModel], doc_id: str) -> str:
    await model.delete_by_id(doc_id)
    logger.info(f"Deleted {_label(model)} {doc_id}")
    return f"{_label(model)} with ID: {doc_id} has been deleted."
