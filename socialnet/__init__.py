# socialnet/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from typing import Optional
from flask import Flask, jsonify, request
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정
from socialnet.core.config import config_by_name
from socialnet.core.exceptions import DomainError

# - API 블루프린트
from socialnet.api.posts.routes import posts_bp

# - 저장소 및 서비스 모듈
from socialnet.stores import PostStore, CommentStore, LikeStore
from socialnet.api.posts.services import PostService

def create_app(config_name: Optional[str] = None):
    """
    Flask 애플리케이션 팩토리 함수.
    호출할 때마다 새로운 저장소 세트와 서비스를 만들기 때문에,
    테스트는 시나리오마다 독립된 앱을 생성할 수 있습니다.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 로깅 설정
    # =====================================================================================
    logging.basicConfig(
        level=getattr(logging, app.config['LOG_LEVEL'].upper(), logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    )

    # =====================================================================================
    # 5. 저장소/서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    # 5-1. 다른 컴포넌트에 의존하지 않는 저장소를 먼저 생성
    post_store = PostStore()
    comment_store = CommentStore()
    like_store = LikeStore()

    # 5-2. 저장소를 주입받는 도메인 서비스 생성
    app.services['posts'] = PostService(
        post_store=post_store,
        comment_store=comment_store,
        like_store=like_store
    )

    # =====================================================================================
    # 6. 기본 라우트 및 블루프린트 등록
    # =====================================================================================
    @app.route('/')
    def index():
        return "Welcome to the Social Network Application!"

    @app.route('/health')
    def health():
        return jsonify({"status": "ok"}), 200

    app.register_blueprint(posts_bp, url_prefix=f"{app.config['API_PREFIX']}/posts")

    @app.after_request
    def log_request(response):
        logging.info(f"{request.method} {request.path} {response.status_code}")
        return response

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(DomainError)
    def handle_domain_error(err):
        # NotFoundError -> 404, ConflictError -> 409, DomainValidationError -> 400
        response = {"error_code": err.error_code, "message": err.message}
        return jsonify(response), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        response = {"error_code": err.name.upper().replace(' ', '_'), "message": err.description}
        return jsonify(response), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부에서 예상치 못한 오류가 발생했습니다."}
        return jsonify(response), 500

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
