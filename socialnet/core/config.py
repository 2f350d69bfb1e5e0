# socialnet/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 로그 레벨 이름 (DEBUG, INFO, WARNING ...). create_app에서 logging.basicConfig에 전달됩니다.
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    # 모든 API 라우트가 마운트되는 경로입니다.
    API_PREFIX = os.getenv('API_PREFIX', '/api/v1')
    DEBUG = False
    TESTING = False

class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    # TESTING = True: Flask를 테스트 모드로 설정합니다.
    TESTING = True
    DEBUG = False
    LOG_LEVEL = 'WARNING'

# config_by_name: FLASK_ENV 값과 설정 클래스를 매핑합니다. create_app에서 사용합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig
)
