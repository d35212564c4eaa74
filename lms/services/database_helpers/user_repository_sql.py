# /lms/services/database_helpers/user_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the User table. It is
the direct interface to the database for account data used by the admin
console, the dashboards and every "join with student name" read path.
"""

from typing import List, Dict, Optional, Iterable
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lms.db.models.user_models import User


class UserRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_user(self, record: Dict) -> Optional[User]:
        """Creates a new User record. Returns None if the email is already taken."""
        new_user = User(**record)
        self.db.add(new_user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return None
        self.db.refresh(new_user)
        return new_user

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_users_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """
        Bulk lookup used by the read paths that attach a student or teacher
        identity to a list of records. Ids that no longer resolve are simply
        absent from the returned map.
        """
        ids = list({uid for uid in user_ids if uid})
        if not ids:
            return {}
        users = self.db.query(User).filter(User.id.in_(ids)).all()
        return {u.id: u for u in users}

    def get_all_users(self, role: Optional[str] = None) -> List[User]:
        """Retrieves users, newest first, optionally filtered by role."""
        query = self.db.query(User)
        if role is not None:
            query = query.filter(User.role == role)
        return query.order_by(User.created_at.desc()).all()

    def count_users(self, role: Optional[str] = None) -> int:
        query = self.db.query(func.count(User.id))
        if role is not None:
            query = query.filter(User.role == role)
        return query.scalar() or 0

    def update_user_role(self, user_id: str, role: str) -> Optional[User]:
        user = self.get_user_by_id(user_id)
        if user:
            user.role = role
            self.db.commit()
            self.db.refresh(user)
        return user

    def delete_user(self, user_id: str) -> Optional[Dict]:
        """
        Hard-deletes a user. Returns a snapshot of the deleted record (the ORM
        object is expired after the commit), or None if it did not exist.
        Nothing that references the user is touched.
        """
        user = self.get_user_by_id(user_id)
        if not user:
            return None
        snapshot = {"id": user.id, "name": user.name, "email": user.email, "role": user.role}
        self.db.delete(user)
        self.db.commit()
        return snapshot
