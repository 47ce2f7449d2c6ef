"""Contact repository - Database operations for contact messages"""

from sqlalchemy.orm import Session

from ...models import Contact


class ContactRepository:
    """Repository for contact messages (write-once)"""

    @staticmethod
    def create_contact(db: Session, **contact_data) -> Contact:
        """Store a contact message; created_at is assigned by the database"""
        contact = Contact(**contact_data)
        db.add(contact)
        db.commit()
        db.refresh(contact)
        return contact
