# socialnet/stores/comments.py
import threading
import uuid
from typing import Dict, List

from socialnet.models.comment import Comment

class CommentStore:
    """
    댓글(Comment) 레코드를 보관하는 저장소.
    게시글 존재 여부는 확인하지 않습니다. (PostService가 호출 전에 확인)
    """
    def __init__(self):
        self._comments: Dict[str, Comment] = {}
        self._lock = threading.Lock()

    def add(self, post_id: str, user_id: str, text: str) -> Comment:
        comment = Comment(
            comment_id=str(uuid.uuid4()),
            post_id=post_id,
            user_id=user_id,
            text=text
        )
        with self._lock:
            self._comments[comment.comment_id] = comment
        return comment

    def list_by_post(self, post_id: str) -> List[Comment]:
        """특정 게시글의 댓글만 추가된 순서대로 반환합니다."""
        with self._lock:
            return [c for c in self._comments.values() if c.post_id == post_id]

    def delete(self, comment_id: str) -> None:
        with self._lock:
            self._comments.pop(comment_id, None)
