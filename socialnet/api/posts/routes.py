# socialnet/api/posts/routes.py
import uuid
from flask import Blueprint, request, jsonify, Response, current_app

from socialnet.core.exceptions import DomainValidationError
from socialnet.api.posts.schemas import (
    PostCreateSchema, PostDeleteSchema, LikeCreateSchema, CommentCreateSchema,
    PostResponseSchema, CommentResponseSchema, LikeResponseSchema
)


posts_bp = Blueprint('posts_bp', __name__)

# 서비스 계층이 던지는 NotFoundError / ConflictError / DomainValidationError와
# marshmallow ValidationError는 app/__init__.py의 전역 에러 핸들러가 응답으로 변환합니다.

def _validate_uuid_param(value: str, param_name: str) -> str:
    """경로 파라미터가 올바른 UUID 형식인지 확인합니다."""
    try:
        return str(uuid.UUID(value))
    except ValueError:
        raise DomainValidationError(f"{param_name}은(는) 올바른 UUID 형식이어야 합니다.")

def _json_body() -> dict:
    # 본문이 없거나 JSON이 아닌 요청도 스키마 검증 단계에서 400으로 처리되도록 빈 dict로 대체
    return request.get_json(silent=True) or {}


@posts_bp.route('/', methods=['POST'])
def create_post():
    """
    새로운 게시글을 생성합니다.
    - 성공 시, 생성된 게시글 정보를 201 Created 상태 코드와 함께 반환합니다.
    """
    post_service = current_app.services['posts']
    data = PostCreateSchema().load(_json_body())
    new_post = post_service.create_post(data['user_id'], data['description'])
    return jsonify(PostResponseSchema().dump(new_post)), 201


@posts_bp.route('/', methods=['GET'])
def get_posts():
    """게시글 목록을 최신순으로 조회합니다."""
    post_service = current_app.services['posts']
    posts = post_service.list_posts()
    return jsonify(PostResponseSchema(many=True).dump(posts)), 200


@posts_bp.route('/<string:post_id>', methods=['GET'])
def get_post(post_id: str):
    post_service = current_app.services['posts']
    post = post_service.get_post(_validate_uuid_param(post_id, 'post_id'))
    return jsonify(PostResponseSchema().dump(post)), 200


@posts_bp.route('/<string:post_id>', methods=['DELETE'])
def delete_post(post_id: str):
    """
    특정 게시글을 삭제합니다. (작성자 본인만 가능)
    - 요청 본문의 user_id가 게시글 작성자와 다르면 400을 반환합니다.
    """
    post_service = current_app.services['posts']
    post_id = _validate_uuid_param(post_id, 'post_id')
    data = PostDeleteSchema().load(_json_body())
    post_service.delete_post(post_id, data['user_id'])
    return Response(status=204) # 성공 시 내용 없이 204 No Content 반환


@posts_bp.route('/<string:post_id>/like', methods=['POST'])
def like_post(post_id: str):
    """
    게시글에 좋아요를 누릅니다.
    - 이미 좋아요를 누른 경우 409 Conflict를 반환합니다.
    """
    post_service = current_app.services['posts']
    post_id = _validate_uuid_param(post_id, 'post_id')
    data = LikeCreateSchema().load(_json_body())
    like = post_service.like_post(post_id, data['user_id'])
    return jsonify(LikeResponseSchema().dump(like)), 201


@posts_bp.route('/<string:post_id>/like/<string:user_id>', methods=['DELETE'])
def unlike_post(post_id: str, user_id: str):
    """
    게시글 좋아요를 취소합니다.
    - 좋아요를 누르지 않은 상태여도 204를 반환합니다.
    """
    post_service = current_app.services['posts']
    post_service.unlike_post(
        _validate_uuid_param(post_id, 'post_id'),
        _validate_uuid_param(user_id, 'user_id')
    )
    return Response(status=204)


@posts_bp.route('/<string:post_id>/comment', methods=['POST'])
def create_comment(post_id: str):
    """특정 게시글에 새로운 댓글을 작성합니다."""
    post_service = current_app.services['posts']
    post_id = _validate_uuid_param(post_id, 'post_id')
    data = CommentCreateSchema().load(_json_body())
    new_comment = post_service.add_comment(post_id, data['user_id'], data['text'])
    return jsonify(CommentResponseSchema().dump(new_comment)), 201


@posts_bp.route('/<string:post_id>/comments', methods=['GET'])
def get_comments(post_id: str):
    post_service = current_app.services['posts']
    comments = post_service.list_comments(_validate_uuid_param(post_id, 'post_id'))
    return jsonify(CommentResponseSchema(many=True).dump(comments)), 200
