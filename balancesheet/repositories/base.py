import logging
from decimal import Decimal
from enum import Enum
from typing import Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlmodel import Session, SQLModel, select

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)
ReadT = TypeVar("ReadT", bound=BaseModel)


def to_decimal(value) -> Decimal:
    # str() primero para que 0.1 no arrastre el error binario del float
    return value if isinstance(value, Decimal) else Decimal(str(value))


class OwnedRecordRepository(Generic[ModelT, ReadT]):
    """
    CRUD de registros financieros que pertenecen a un usuario.

    Toda lectura/escritura por id filtra también por user_id: un id de otro
    usuario se comporta igual que uno inexistente. Los montos viven como
    NUMERIC en la base y salen como float hacia la API.
    """

    model: Type[ModelT]
    read_schema: Type[ReadT]
    decimal_fields: Sequence[str] = ()
    label: str = "record"

    def __init__(self, session: Session):
        self.session = session

    def _owned(self, record_id: str, user_id: int) -> Optional[ModelT]:
        return self.session.exec(
            select(self.model).where(self.model.id == record_id, self.model.user_id == user_id)
        ).first()

    def _to_columns(self, data: dict) -> dict:
        values = {}
        for key, value in data.items():
            if isinstance(value, Enum):
                value = value.value
            if key in self.decimal_fields and value is not None:
                value = to_decimal(value)
            values[key] = value
        return values

    def to_read(self, record: ModelT) -> ReadT:
        data = record.model_dump()
        for field in self.decimal_fields:
            data[field] = float(data[field])
        if "notes" in data and not data["notes"]:
            data["notes"] = None
        return self.read_schema(**data)

    def list(self, user_id: int) -> List[ReadT]:
        records = self.session.exec(
            select(self.model).where(self.model.user_id == user_id).order_by(self.model.created_at)
        ).all()
        return [self.to_read(r) for r in records]

    def get(self, record_id: str, user_id: int) -> Optional[ReadT]:
        record = self._owned(record_id, user_id)
        return self.to_read(record) if record else None

    def create(self, user_id: int, data: dict) -> ReadT:
        values = self._to_columns(data)
        values.pop("id", None)  # el id siempre lo genera el servidor
        record = self.model(**values, user_id=user_id)
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        logger.debug("Created %s %s for user %s", self.label, record.id, user_id)
        return self.to_read(record)

    def update(self, record_id: str, user_id: int, changes: dict) -> Optional[ReadT]:
        record = self._owned(record_id, user_id)
        if not record:
            return None

        for key, value in self._to_columns(changes).items():
            if key in ("id", "user_id", "created_at"):
                continue
            setattr(record, key, value)

        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        logger.debug("Updated %s %s for user %s", self.label, record_id, user_id)
        return self.to_read(record)

    def delete(self, record_id: str, user_id: int) -> bool:
        record = self._owned(record_id, user_id)
        if not record:
            return False
        self.session.delete(record)
        self.session.commit()
        logger.debug("Deleted %s %s for user %s", self.label, record_id, user_id)
        return True
