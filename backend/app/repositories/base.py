"""엔티티 공통 저장소입니다. 모든 엔티티가 같은 조회/생성/삭제 패턴을 공유합니다."""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.database import Base

ModelT = TypeVar("ModelT", bound=Base)

# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN, SQLITE_INT_MAX = -(2 ** 63), 2 ** 63 - 1


def fits_sqlite_int(value: int) -> bool:
    return SQLITE_INT_MIN <= value <= SQLITE_INT_MAX


class EntityRepository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[ModelT]:
        return (
            self.db.query(self.model)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .all()
        )

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        if not fits_sqlite_int(entity_id):
            return None
        return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def create(self, **fields) -> int:
        row = self.model(**fields)
        self.db.add(row)
        self._commit()
        return row.id

    def delete(self, entity_id: int, commit: bool = True) -> int:
        if not fits_sqlite_int(entity_id):
            return 0
        removed = self.db.query(self.model).filter(self.model.id == entity_id).delete()
        if commit:
            self._commit()
        return removed

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
