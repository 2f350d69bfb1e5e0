# socialnet/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간 처리를 위한 중앙화된 유틸리티 모듈

이 모듈의 목적:
1. 모든 타임스탬프를 UTC timezone-aware datetime으로 통일
2. ISO 포맷 문자열 생성 통일
3. updated_at 같은 갱신 시각이 절대 과거로 돌아가지 않도록 보장
"""

import logging
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """시간 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """timezone-naive인 경우 UTC로 간주하고, aware인 경우 UTC로 변환"""
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """datetime 객체를 ISO 포맷 문자열로 변환 (Z 접미사 포함)"""
        try:
            return DateTimeUtils.to_utc(dt).isoformat().replace('+00:00', 'Z')
        except Exception as e:
            logger.error(f"ISO 문자열 변환 실패: {dt} - {e}")
            raise ValueError(f"datetime 객체를 ISO 문자열로 변환할 수 없습니다: {dt}")

    @staticmethod
    def advance(previous: datetime) -> datetime:
        """
        갱신 시각을 계산합니다.

        시스템 시계가 뒤로 가더라도 이전 값보다 작은 값은 반환하지 않습니다.
        """
        current = DateTimeUtils.now()
        previous = DateTimeUtils.to_utc(previous)
        return current if current >= previous else previous


# 편의 함수
def to_iso(dt: datetime) -> str:
    """datetime을 ISO 문자열로 변환"""
    return DateTimeUtils.to_iso_string(dt)
