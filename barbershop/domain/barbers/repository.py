"""Barber repository - Database operations for barbers"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Barber


class BarberRepository:
    """Repository for barber database operations"""

    @staticmethod
    def get_barbers(db: Session) -> list[Barber]:
        """Get all barbers"""
        return db.query(Barber).order_by(Barber.id).all()

    @staticmethod
    def get_barber_by_id(db: Session, barber_id: int) -> Optional[Barber]:
        """Get a specific barber by ID"""
        return db.query(Barber).filter(Barber.id == barber_id).first()

    @staticmethod
    def create_barber(db: Session, **barber_data) -> Barber:
        """Create a new barber"""
        barber = Barber(**barber_data)
        db.add(barber)
        db.commit()
        db.refresh(barber)
        return barber

    @staticmethod
    def update_barber(db: Session, barber_id: int, **updates) -> Optional[Barber]:
        """Apply the given fields (explicit None included), None if it does not exist"""
        barber = BarberRepository.get_barber_by_id(db, barber_id)
        if not barber:
            return None

        for key, value in updates.items():
            if hasattr(barber, key):
                setattr(barber, key, value)

        db.commit()
        db.refresh(barber)
        return barber

    @staticmethod
    def delete_barber(db: Session, barber_id: int) -> None:
        """Delete a barber; deleting an unknown id is a no-op"""
        db.query(Barber).filter(Barber.id == barber_id).delete(synchronize_session=False)
        db.commit()
