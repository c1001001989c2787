"""
Logging setup.

모든 모듈은 logging.getLogger(__name__) 사용.
설정은 default.yaml의 logging 섹션:
    logging:
      level: INFO
"""

import logging

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(config: dict) -> int:
    """설정의 level 문자열 → logging 상수. 잘못된 값은 INFO."""
    name = str(config.get("logging", {}).get("level", DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level


def setup_logging(config: dict) -> None:
    """
    루트 로거 설정.

    uvicorn이 이미 핸들러를 붙였으면 레벨만 맞춘다.
    """
    level = resolve_log_level(config)
    log_format = config.get("logging", {}).get("format", DEFAULT_LOG_FORMAT)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=log_format)
    root.setLevel(level)

    # 요청 단위 httpx 로그는 DEBUG에서만
    httpx_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    logging.getLogger("httpx").setLevel(httpx_level)
