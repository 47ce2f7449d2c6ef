"""Service repository - Database operations for the service catalog"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Service


class ServiceRepository:
    """Repository for service database operations"""

    @staticmethod
    def get_services(db: Session) -> list[Service]:
        """Get all services"""
        return db.query(Service).order_by(Service.id).all()

    @staticmethod
    def get_service_by_id(db: Session, service_id: int) -> Optional[Service]:
        """Get a specific service by ID"""
        return db.query(Service).filter(Service.id == service_id).first()

    @staticmethod
    def create_service(db: Session, **service_data) -> Service:
        """Create a new service"""
        service = Service(**service_data)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def update_service(db: Session, service_id: int, **updates) -> Optional[Service]:
        """Apply the given fields (explicit None included), None if it does not exist"""
        service = ServiceRepository.get_service_by_id(db, service_id)
        if not service:
            return None

        for key, value in updates.items():
            if hasattr(service, key):
                setattr(service, key, value)

        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def delete_service(db: Session, service_id: int) -> None:
        """Delete a service; deleting an unknown id is a no-op"""
        db.query(Service).filter(Service.id == service_id).delete(synchronize_session=False)
        db.commit()
