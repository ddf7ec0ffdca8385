"""CRUD operations for articles."""

from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.models.article import Article
from backend.app.schemas.article import ArticleCreate, ArticleUpdate


class CRUDArticle:
    def create(self, db: Session, *, obj_in: ArticleCreate) -> Article:
        obj = Article(**obj_in.model_dump())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, article_id: int) -> Optional[Article]:
        return db.query(Article).filter(Article.id == article_id).first()

    def get_multi(self, db: Session) -> List[Article]:
        return db.query(Article).order_by(Article.name.asc(), Article.id.asc()).all()

    def update(self, db: Session, *, db_obj: Article, obj_in: ArticleUpdate) -> Article:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: Article) -> Article:
        db.delete(db_obj)
        db.commit()
        return db_obj


article_crud = CRUDArticle()
