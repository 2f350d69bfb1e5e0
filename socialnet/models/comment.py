# socialnet/models/comment.py
from dataclasses import dataclass, field
from datetime import datetime

from socialnet.utils.datetime_utils import DateTimeUtils

@dataclass(frozen=True)
class Comment:
    """
    CommentStore가 보관하는 댓글 레코드 구조를 정의하는 데이터클래스.
    """
    comment_id: str
    post_id: str
    user_id: str
    text: str
    created_at: datetime = field(default_factory=DateTimeUtils.now)
