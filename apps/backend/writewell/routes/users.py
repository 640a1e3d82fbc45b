# apps/backend/writewell/routes/users.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from writewell.db import get_db
from writewell.models.user import Document, User
from writewell.schemas.users import DocumentOut, UserOut

router = APIRouter()


@router.get("/")
def root():
  return {"message": "API running!"}


@router.get("/users", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db)):
  return db.scalars(select(User).order_by(User.created_at)).all()


@router.get("/users/{user_id}/documents", response_model=List[DocumentOut])
def list_user_documents(user_id: UUID, db: Session = Depends(get_db)):
  if db.get(User, user_id) is None:
    raise HTTPException(status_code=404, detail="User not found")

  stmt = select(Document).where(Document.user_id == user_id).order_by(Document.created_at)
  return db.scalars(stmt).all()
