# socialnet/api/posts/schemas.py
from marshmallow import Schema, fields, validate, post_load

from socialnet.utils.datetime_utils import to_iso

# --- 재사용을 위한 베이스 스키마 ---
class UserIdSchema(Schema):
    """요청 본문에 포함된 사용자 ID를 검사합니다. UUID 문자열로 정규화해 돌려줍니다."""
    user_id = fields.UUID(required=True)

    @post_load
    def stringify_ids(self, data, **kwargs):
        data['user_id'] = str(data['user_id'])
        return data

# --- API 요청 스키마 ---

class PostCreateSchema(UserIdSchema):
    """POST /api/v1/posts 요청 본문의 유효성을 검사합니다."""
    description = fields.Str(required=True, validate=validate.Length(min=1, max=1000, error="게시글은 1~1000자 사이여야 합니다."))

class PostDeleteSchema(UserIdSchema):
    """DELETE /api/v1/posts/{post_id} 요청 본문. 삭제를 요청한 사용자를 지정합니다."""

class LikeCreateSchema(UserIdSchema):
    """POST /api/v1/posts/{post_id}/like 요청 본문의 유효성을 검사합니다."""

class CommentCreateSchema(UserIdSchema):
    """POST /api/v1/posts/{post_id}/comment 요청 본문의 유효성을 검사합니다."""
    text = fields.Str(required=True, validate=validate.Length(min=1, max=500, error="댓글은 1~500자 사이여야 합니다."))

# --- API 응답 스키마 ---
# 타임스탬프는 모두 Z 접미사가 붙은 UTC ISO 문자열로 내보냅니다.

class PostResponseSchema(Schema):
    """게시글 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    post_id = fields.Str(required=True)
    user_id = fields.Str(required=True)
    description = fields.Str(required=True)
    like_count = fields.Int(required=True)
    comment_count = fields.Int(required=True)
    created_at = fields.Function(lambda obj: to_iso(obj.created_at))
    updated_at = fields.Function(lambda obj: to_iso(obj.updated_at))

class CommentResponseSchema(Schema):
    """댓글 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    comment_id = fields.Str(required=True)
    post_id = fields.Str(required=True)
    user_id = fields.Str(required=True)
    text = fields.Str(required=True)
    created_at = fields.Function(lambda obj: to_iso(obj.created_at))

class LikeResponseSchema(Schema):
    post_id = fields.Str(required=True)
    user_id = fields.Str(required=True)
    created_at = fields.Function(lambda obj: to_iso(obj.created_at))
