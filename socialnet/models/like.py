# socialnet/models/like.py
from dataclasses import dataclass, field
from datetime import datetime

from socialnet.utils.datetime_utils import DateTimeUtils

@dataclass(frozen=True)
class Like:
    """
    좋아요 사실(fact) 하나를 표현합니다.
    별도의 ID 없이 (post_id, user_id) 쌍 자체가 식별자입니다.
    """
    post_id: str
    user_id: str
    created_at: datetime = field(default_factory=DateTimeUtils.now)
