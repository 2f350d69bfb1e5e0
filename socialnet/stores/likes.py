# socialnet/stores/likes.py
import threading
from typing import Dict

from socialnet.models.like import Like

class LikeStore:
    """
    좋아요 사실(Like)을 (post_id, user_id) 기준으로 중복 없이 보관하는 저장소.
    - 게시글별로 {user_id: Like} 맵을 유지하므로 한 사용자는 한 게시글에 하나의 좋아요만 가집니다.
    - count()가 게시글 좋아요 수의 원본(source of truth)입니다.
    """
    def __init__(self):
        self._likes_by_post: Dict[str, Dict[str, Like]] = {}
        self._lock = threading.Lock()

    def add(self, post_id: str, user_id: str) -> Like:
        """이미 존재하면 기존 좋아요를 그대로 반환합니다. (created_at 갱신 없음)"""
        with self._lock:
            likes = self._likes_by_post.setdefault(post_id, {})
            existing = likes.get(user_id)
            if existing:
                return existing
            like = Like(post_id=post_id, user_id=user_id)
            likes[user_id] = like
            return like

    def has(self, post_id: str, user_id: str) -> bool:
        with self._lock:
            return user_id in self._likes_by_post.get(post_id, {})

    def count(self, post_id: str) -> int:
        with self._lock:
            return len(self._likes_by_post.get(post_id, {}))

    def remove(self, post_id: str, user_id: str) -> None:
        """없는 좋아요를 제거해도 조용히 넘어갑니다."""
        with self._lock:
            likes = self._likes_by_post.get(post_id)
            if not likes:
                return
            likes.pop(user_id, None)
            if not likes:
                del self._likes_by_post[post_id]
