"""
App layer: UI 서버 (FastAPI + Jinja2).

역할:
- 사용자/상품 화면 렌더링, form/파일 업로드 처리
- 백엔드 REST API 호출 (services/backend.py)
- ⚠️ 검증/비즈니스 규칙 없음 (백엔드에 위임)

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML
- src/app/static/ → CSS
"""
