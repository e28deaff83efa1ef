"""렌터카 API 엔트리포인트.

Application entry point: logging setup, middleware, health check and
the ``/api/v1`` routers.

Run:
    uvicorn carrental.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carrental.api.v1 import api_router
from carrental.config import settings
from carrental.middleware.request_logging import RequestLoggingMiddleware

# 모듈별 getLogger(__name__) 로거의 루트 설정: root config for per-module loggers
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    description="Fleet, customers, reservations and rentals",
    version="1.0.0",
)

# 먼저 등록된 미들웨어가 안쪽에 위치: earlier middleware sits inside CORS
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """로드밸런서 헬스 체크 (Liveness check)."""
    return {"status": "ok"}
