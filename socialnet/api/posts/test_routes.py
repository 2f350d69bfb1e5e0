# socialnet/api/posts/test_routes.py
"""
게시글 API 통합 테스트 (Flask 테스트 클라이언트 사용)

사용법: python -m pytest socialnet/api/posts/test_routes.py -v
"""

import pytest

from socialnet import create_app

USER_ID = "550e8400-e29b-41d4-a716-446655440000"
USER_ID_2 = "660e8400-e29b-41d4-a716-446655440001"
FAKE_POST_ID = "123e4567-e89b-12d3-a456-426614174000"
BASE = "/api/v1/posts"


@pytest.fixture
def client():
    """테스트마다 새로운 저장소를 가진 앱을 생성합니다."""
    app = create_app('testing')
    return app.test_client()

def _create_post(client, user_id=USER_ID, description="Test post"):
    response = client.post(f"{BASE}/", json={"user_id": user_id, "description": description})
    assert response.status_code == 201
    return response.get_json()


# --- 기본 엔드포인트 ---

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}

def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"Welcome" in response.data

def test_unknown_route_returns_json_404(client):
    response = client.get("/api/v1/unknown")
    assert response.status_code == 404
    assert response.get_json()["error_code"] == "NOT_FOUND"


# --- POST /api/v1/posts ---

def test_create_post(client):
    body = _create_post(client, description="This is my first post!")

    assert body["user_id"] == USER_ID
    assert body["description"] == "This is my first post!"
    assert body["like_count"] == 0
    assert body["comment_count"] == 0
    assert "post_id" in body
    assert "created_at" in body
    assert "updated_at" in body

def test_timestamps_are_utc_iso_with_z_suffix(client):
    """모든 응답의 타임스탬프는 Z 접미사가 붙은 UTC ISO 문자열이어야 함"""
    post = _create_post(client)
    like = client.post(f"{BASE}/{post['post_id']}/like", json={"user_id": USER_ID_2}).get_json()
    comment = client.post(f"{BASE}/{post['post_id']}/comment", json={"user_id": USER_ID_2, "text": "hi"}).get_json()
    fetched = client.get(f"{BASE}/{post['post_id']}").get_json()

    timestamps = [
        post["created_at"], post["updated_at"],
        fetched["created_at"], fetched["updated_at"],
        like["created_at"], comment["created_at"],
    ]
    for value in timestamps:
        assert value.endswith("Z")
        assert "+00:00" not in value

@pytest.mark.parametrize("payload", [
    {"user_id": "invalid-uuid", "description": "Test post"},
    {"description": "Test post"},
    {"user_id": USER_ID, "description": ""},
    {"user_id": USER_ID, "description": "a" * 1001},
    {"user_id": USER_ID, "description": "ok", "extra": 1},
])
def test_create_post_validation_errors(client, payload):
    response = client.post(f"{BASE}/", json=payload)
    assert response.status_code == 400
    assert response.get_json()["error_code"] == "VALIDATION_ERROR"

def test_create_post_without_json_body(client):
    response = client.post(f"{BASE}/", data="not json")
    assert response.status_code == 400


# --- GET /api/v1/posts ---

def test_list_posts_empty(client):
    response = client.get(f"{BASE}/")
    assert response.status_code == 200
    assert response.get_json() == []

def test_list_posts_newest_first(client):
    first = _create_post(client, description="First post")
    second = _create_post(client, description="Second post")

    body = client.get(f"{BASE}/").get_json()
    assert [p["post_id"] for p in body] == [second["post_id"], first["post_id"]]


# --- GET /api/v1/posts/<post_id> ---

def test_get_post(client):
    post = _create_post(client)
    response = client.get(f"{BASE}/{post['post_id']}")

    assert response.status_code == 200
    assert response.get_json()["description"] == "Test post"

def test_get_post_not_found(client):
    response = client.get(f"{BASE}/{FAKE_POST_ID}")
    assert response.status_code == 404
    assert response.get_json()["error_code"] == "POST_NOT_FOUND"

def test_get_post_invalid_uuid(client):
    response = client.get(f"{BASE}/invalid-uuid")
    assert response.status_code == 400
    assert "message" in response.get_json()


# --- DELETE /api/v1/posts/<post_id> ---

def test_delete_post(client):
    post = _create_post(client)

    response = client.delete(f"{BASE}/{post['post_id']}", json={"user_id": USER_ID})
    assert response.status_code == 204
    assert client.get(f"{BASE}/{post['post_id']}").status_code == 404

def test_delete_post_by_non_owner(client):
    post = _create_post(client)

    response = client.delete(f"{BASE}/{post['post_id']}", json={"user_id": USER_ID_2})
    assert response.status_code == 400
    assert response.get_json()["message"] == "게시글 작성자만 게시글을 삭제할 수 있습니다."
    assert client.get(f"{BASE}/{post['post_id']}").status_code == 200

@pytest.mark.parametrize("payload", [{}, {"user_id": "invalid-uuid"}])
def test_delete_post_validation_errors(client, payload):
    post = _create_post(client)
    response = client.delete(f"{BASE}/{post['post_id']}", json=payload)
    assert response.status_code == 400

def test_delete_post_not_found(client):
    response = client.delete(f"{BASE}/{FAKE_POST_ID}", json={"user_id": USER_ID})
    assert response.status_code == 404


# --- POST /api/v1/posts/<post_id>/like ---

def test_like_post(client):
    post = _create_post(client)

    response = client.post(f"{BASE}/{post['post_id']}/like", json={"user_id": USER_ID_2})
    assert response.status_code == 201
    body = response.get_json()
    assert body["post_id"] == post["post_id"]
    assert body["user_id"] == USER_ID_2
    assert "created_at" in body

    assert client.get(f"{BASE}/{post['post_id']}").get_json()["like_count"] == 1

def test_like_post_twice_conflict(client):
    post = _create_post(client)
    client.post(f"{BASE}/{post['post_id']}/like", json={"user_id": USER_ID_2})

    response = client.post(f"{BASE}/{post['post_id']}/like", json={"user_id": USER_ID_2})
    assert response.status_code == 409
    assert response.get_json()["error_code"] == "CONFLICT"
    assert client.get(f"{BASE}/{post['post_id']}").get_json()["like_count"] == 1

def test_like_post_not_found(client):
    response = client.post(f"{BASE}/{FAKE_POST_ID}/like", json={"user_id": USER_ID_2})
    assert response.status_code == 404


# --- DELETE /api/v1/posts/<post_id>/like/<user_id> ---

def test_unlike_post(client):
    post = _create_post(client)
    client.post(f"{BASE}/{post['post_id']}/like", json={"user_id": USER_ID_2})

    response = client.delete(f"{BASE}/{post['post_id']}/like/{USER_ID_2}")
    assert response.status_code == 204
    assert client.get(f"{BASE}/{post['post_id']}").get_json()["like_count"] == 0

def test_unlike_without_like_is_idempotent(client):
    post = _create_post(client)

    assert client.delete(f"{BASE}/{post['post_id']}/like/{USER_ID_2}").status_code == 204
    assert client.delete(f"{BASE}/{post['post_id']}/like/{USER_ID_2}").status_code == 204

def test_unlike_invalid_user_id(client):
    post = _create_post(client)
    response = client.delete(f"{BASE}/{post['post_id']}/like/not-a-uuid")
    assert response.status_code == 400


# --- 댓글 ---

def test_add_comment(client):
    post = _create_post(client)

    response = client.post(f"{BASE}/{post['post_id']}/comment", json={"user_id": USER_ID_2, "text": "Great post!"})
    assert response.status_code == 201
    body = response.get_json()
    assert body["post_id"] == post["post_id"]
    assert body["user_id"] == USER_ID_2
    assert body["text"] == "Great post!"
    assert "comment_id" in body
    assert "created_at" in body

    assert client.get(f"{BASE}/{post['post_id']}").get_json()["comment_count"] == 1

@pytest.mark.parametrize("text", ["", "a" * 501])
def test_add_comment_invalid_text(client, text):
    post = _create_post(client)
    response = client.post(f"{BASE}/{post['post_id']}/comment", json={"user_id": USER_ID_2, "text": text})
    assert response.status_code == 400

def test_add_comment_not_found(client):
    response = client.post(f"{BASE}/{FAKE_POST_ID}/comment", json={"user_id": USER_ID_2, "text": "hi"})
    assert response.status_code == 404

def test_list_comments(client):
    post = _create_post(client)
    other = _create_post(client, description="Other")
    client.post(f"{BASE}/{post['post_id']}/comment", json={"user_id": USER_ID_2, "text": "First comment"})
    client.post(f"{BASE}/{post['post_id']}/comment", json={"user_id": USER_ID, "text": "Second comment"})
    client.post(f"{BASE}/{other['post_id']}/comment", json={"user_id": USER_ID, "text": "Elsewhere"})

    response = client.get(f"{BASE}/{post['post_id']}/comments")
    assert response.status_code == 200
    assert [c["text"] for c in response.get_json()] == ["First comment", "Second comment"]

def test_list_comments_empty(client):
    post = _create_post(client)
    response = client.get(f"{BASE}/{post['post_id']}/comments")
    assert response.status_code == 200
    assert response.get_json() == []

def test_list_comments_not_found(client):
    response = client.get(f"{BASE}/{FAKE_POST_ID}/comments")
    assert response.status_code == 404
