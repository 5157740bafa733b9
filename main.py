from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# HTTP 라이브러리 디버그 로그 비활성화
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)


# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import students, frontend
from dependencies.storage import get_store

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS 설정 (다른 출처의 프론트엔드에서도 호출 가능)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
app.add_middleware(TimingMiddleware)

# ✅ 전역 에러 핸들러 등록 (일관된 {"error": "..."} 포맷)
add_error_handlers(app)


# ✅ 헬스체크 엔드포인트
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}


# ✅ 라우터 등록 (frontend 는 catch-all 이므로 반드시 마지막)
app.include_router(students.router)
app.include_router(frontend.router)


@app.on_event("startup")
def _prepare_storage():
    # Render 에서는 저장소 디렉터리가 읽기 전용 → /tmp 로 원본 데이터 복사
    if settings.RENDER:
        get_store().seed_from(settings.LOCAL_DATA_PATH)
    logger.info(f"SIMS server running on http://localhost:{settings.PORT}")
    logger.info(f"Student data file: {settings.DATA_PATH}")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
