# socialnet/stores/posts.py
import itertools
import logging
import threading
import uuid
from dataclasses import replace
from typing import Dict, List, Optional

from socialnet.models.post import Post
from socialnet.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)

class PostStore:
    """
    게시글(Post) 레코드를 프로세스 메모리에 보관하는 저장소.
    - 저장된 레코드는 외부에 노출하지 않고 항상 복사본을 주고받습니다.
    - 존재 여부 확인, 권한 확인 등은 PostService의 책임입니다.
    """
    def __init__(self):
        self._posts: Dict[str, Post] = {}
        self._sequence: Dict[str, int] = {}  # 생성 시각이 같은 게시글의 정렬 기준
        self._counter = itertools.count()
        self._lock = threading.RLock()

    def create(self, user_id: str, description: str) -> Post:
        """새 ID를 발급하고 카운터를 0으로 초기화한 게시글을 저장합니다."""
        created_at = DateTimeUtils.now()
        post = Post(
            post_id=str(uuid.uuid4()),
            user_id=user_id,
            description=description,
            created_at=created_at,
            updated_at=created_at
        )
        with self._lock:
            self._posts[post.post_id] = post
            self._sequence[post.post_id] = next(self._counter)
        logger.debug(f"게시글 레코드 생성 (post_id: {post.post_id})")
        return replace(post)

    def get_by_id(self, post_id: str) -> Optional[Post]:
        with self._lock:
            post = self._posts.get(post_id)
            return replace(post) if post else None

    def list_all(self) -> List[Post]:
        """모든 게시글을 생성 시각 내림차순(최신순)으로 반환합니다."""
        with self._lock:
            posts = sorted(
                self._posts.values(),
                key=lambda p: (p.created_at, self._sequence[p.post_id]),
                reverse=True
            )
            return [replace(p) for p in posts]

    def update(self, post: Post) -> None:
        """해당 ID의 레코드를 통째로 교체합니다."""
        with self._lock:
            self._posts[post.post_id] = replace(post)
            self._sequence.setdefault(post.post_id, next(self._counter))

    def delete(self, post_id: str) -> None:
        """없는 ID를 삭제해도 아무 일도 일어나지 않습니다."""
        with self._lock:
            self._posts.pop(post_id, None)
            self._sequence.pop(post_id, None)
