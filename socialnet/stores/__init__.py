# socialnet/stores/__init__.py
"""
프로세스 메모리 기반 저장소 패키지

각 저장소는 자신이 보관하는 엔티티의 수명을 단독으로 관리하며,
저장소끼리는 서로를 알지 못합니다. 여러 저장소에 걸친 작업은 PostService만 수행합니다.
"""

from .posts import PostStore
from .comments import CommentStore
from .likes import LikeStore

__all__ = ['PostStore', 'CommentStore', 'LikeStore']
