# socialnet/models/post.py
from dataclasses import dataclass, field
from datetime import datetime

from socialnet.utils.datetime_utils import DateTimeUtils

@dataclass
class Post:
    """
    PostStore가 보관하는 게시글 레코드 구조를 정의하는 데이터클래스.
    - like_count는 LikeStore.count()의 캐시 값입니다.
    - comment_count는 댓글이 추가될 때마다 1씩 증가합니다.
    """
    post_id: str
    user_id: str
    description: str
    like_count: int = 0
    comment_count: int = 0
    created_at: datetime = field(default_factory=DateTimeUtils.now)
    updated_at: datetime = field(default_factory=DateTimeUtils.now)
