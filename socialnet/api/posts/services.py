# socialnet/api/posts/services.py
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List

from socialnet.core.exceptions import ConflictError, DomainValidationError, NotFoundError
from socialnet.models.comment import Comment
from socialnet.models.like import Like
from socialnet.models.post import Post
from socialnet.stores import CommentStore, LikeStore, PostStore
from socialnet.utils.datetime_utils import DateTimeUtils

class PostService:
    """
    게시글, 댓글, 좋아요에 관한 비즈니스 로직을 담당하는 서비스 클래스.
    세 저장소를 조율하는 유일한 진입점이며 다음 규칙을 보장합니다.
    - 게시글 삭제는 작성자 본인만 가능합니다.
    - 같은 사용자의 중복 좋아요는 ConflictError로 거부합니다.
    - like_count는 항상 LikeStore.count()로 다시 계산합니다.

    게시글을 읽고, 파생 필드를 수정하고, 다시 저장하는 작업은
    게시글 ID별 락 안에서 수행됩니다.
    """
    def __init__(self, post_store: PostStore, comment_store: CommentStore, like_store: LikeStore):
        self.post_store = post_store
        self.comment_store = comment_store
        self.like_store = like_store
        self._locks_guard = threading.Lock()
        self._post_locks: Dict[str, threading.Lock] = {}

    @contextmanager
    def _post_lock(self, post_id: str) -> Iterator[None]:
        """게시글 ID 단위의 상호 배제 구간을 제공합니다."""
        with self._locks_guard:
            lock = self._post_locks.setdefault(post_id, threading.Lock())
        with lock:
            try:
                yield
            except NotFoundError:
                # 존재하지 않는 게시글의 락은 남겨두지 않습니다.
                with self._locks_guard:
                    self._post_locks.pop(post_id, None)
                raise

    def _get_existing_post(self, post_id: str) -> Post:
        post = self.post_store.get_by_id(post_id)
        if not post:
            raise NotFoundError("게시물을 찾을 수 없습니다.")
        return post

    def create_post(self, user_id: str, description: str) -> Post:
        """새로운 게시글을 생성합니다. 입력 형식은 경계 계층에서 이미 검증되었다고 가정합니다."""
        post = self.post_store.create(user_id, description)
        logging.info(f"게시글 생성 (post_id: {post.post_id}, user_id: {user_id})")
        return post

    def get_post(self, post_id: str) -> Post:
        return self._get_existing_post(post_id)

    def list_posts(self) -> List[Post]:
        return self.post_store.list_all()

    def delete_post(self, post_id: str, requester_id: str) -> None:
        """
        게시글을 삭제합니다. (작성자 본인만 가능)
        연결된 댓글과 좋아요는 삭제하지 않습니다.
        """
        with self._post_lock(post_id):
            post = self._get_existing_post(post_id)
            if post.user_id != requester_id:
                logging.warning(f"게시글 삭제 거부 (post_id: {post_id}, requester_id: {requester_id})")
                raise DomainValidationError("게시글 작성자만 게시글을 삭제할 수 있습니다.")
            self.post_store.delete(post_id)
            with self._locks_guard:
                self._post_locks.pop(post_id, None)
        logging.info(f"게시글 삭제 (post_id: {post_id})")

    def like_post(self, post_id: str, user_id: str) -> Like:
        """
        게시글에 좋아요를 누릅니다.
        - 이미 좋아요를 누른 상태라면 ConflictError를 발생시킵니다. (토글하지 않음)
        - like_count는 로컬에서 증가시키지 않고 LikeStore에서 다시 읽어옵니다.
        """
        with self._post_lock(post_id):
            post = self._get_existing_post(post_id)
            if self.like_store.has(post_id, user_id):
                logging.warning(f"중복 좋아요 거부 (post_id: {post_id}, user_id: {user_id})")
                raise ConflictError("이미 좋아요를 누른 게시물입니다.")

            like = self.like_store.add(post_id, user_id)
            post.like_count = self.like_store.count(post_id)
            post.updated_at = DateTimeUtils.advance(post.updated_at)
            self.post_store.update(post)
        logging.info(f"좋아요 추가 (post_id: {post_id}, user_id: {user_id}, like_count: {post.like_count})")
        return like

    def unlike_post(self, post_id: str, user_id: str) -> None:
        """좋아요를 취소합니다. 좋아요가 없으면 아무 것도 바꾸지 않고 성공합니다."""
        with self._post_lock(post_id):
            post = self._get_existing_post(post_id)
            if not self.like_store.has(post_id, user_id):
                return

            self.like_store.remove(post_id, user_id)
            post.like_count = self.like_store.count(post_id)
            post.updated_at = DateTimeUtils.advance(post.updated_at)
            self.post_store.update(post)
        logging.info(f"좋아요 취소 (post_id: {post_id}, user_id: {user_id}, like_count: {post.like_count})")

    def add_comment(self, post_id: str, user_id: str, text: str) -> Comment:
        """
        게시글에 댓글을 추가합니다.
        댓글은 취소 경로가 없으므로 comment_count는 1씩 증가시킵니다.
        """
        with self._post_lock(post_id):
            post = self._get_existing_post(post_id)
            comment = self.comment_store.add(post_id, user_id, text)
            post.comment_count += 1
            post.updated_at = DateTimeUtils.advance(post.updated_at)
            self.post_store.update(post)
        logging.info(f"댓글 추가 (post_id: {post_id}, comment_id: {comment.comment_id})")
        return comment

    def list_comments(self, post_id: str) -> List[Comment]:
        self._get_existing_post(post_id)
        return self.comment_store.list_by_post(post_id)
