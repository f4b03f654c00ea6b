"""엔티티별 저장소 구현입니다."""

from typing import List, Optional

from app.models.comment import Comment
from app.models.content import Download, Post, Update
from app.models.user import User
from app.repositories.base import EntityRepository, fits_sqlite_int


class UserRepository(EntityRepository[User]):
    model = User

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()


class PostRepository(EntityRepository[Post]):
    model = Post


class UpdateRepository(EntityRepository[Update]):
    model = Update


class DownloadRepository(EntityRepository[Download]):
    model = Download


class CommentRepository(EntityRepository[Comment]):
    model = Comment

    def list_for_item(self, item_type: str, item_id: int, approved_only: bool = True) -> List[Comment]:
        if not fits_sqlite_int(item_id):
            return []
        query = self.db.query(Comment).filter(Comment.item_type == item_type, Comment.item_id == item_id)
        if approved_only:
            query = query.filter(Comment.approved == True)
        return query.order_by(Comment.created_at.desc(), Comment.id.desc()).all()

    def delete_for_item(self, item_type: str, item_id: int, commit: bool = True) -> int:
        if not fits_sqlite_int(item_id):
            return 0
        removed = (
            self.db.query(Comment)
            .filter(Comment.item_type == item_type, Comment.item_id == item_id)
            .delete()
        )
        if commit:
            self._commit()
        return removed


# comment item_type -> repository of the commented entity
ITEM_REPOSITORIES = {
    "post": PostRepository,
    "update": UpdateRepository,
    "download": DownloadRepository,
}
