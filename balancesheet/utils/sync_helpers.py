import logging
from typing import List, Sequence

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from balancesheet.repositories.base import OwnedRecordRepository

logger = logging.getLogger(__name__)


def sync_records(repo: OwnedRecordRepository, user_id: int, items: Sequence, plural: str) -> List:
    """
    Sincronización masiva: cada elemento con id se actualiza (solo si es del
    usuario), cada elemento sin id se crea. Cada escritura se confirma por
    separado, así que un fallo no deshace las anteriores; si alguno falla la
    respuesta completa es un 500.
    """
    failures = 0
    for item in items:
        data = item.model_dump(exclude={"id"})
        try:
            if item.id:
                repo.update(item.id, user_id, data)
            else:
                repo.create(user_id, data)
        except SQLAlchemyError:
            repo.session.rollback()
            failures += 1
            logger.exception("Failed to sync %s element for user %s", repo.label, user_id)

    if failures:
        raise HTTPException(status_code=500, detail=f"Failed to sync {plural}")

    return repo.list(user_id)
