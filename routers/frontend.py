from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from config.settings import settings

router = APIRouter(tags=["Front"])

ENTRY_DOCUMENT = "index.html"


def resolve_static(full_path: str, static_dir: Path) -> Path:
    """
    요청 경로에 해당하는 정적 파일, 없으면 진입 문서(index.html)
    - static_dir 밖으로 나가는 경로(../)나 파일 이름으로 쓸 수 없는 경로는 진입 문서로 처리
    """
    root = static_dir.resolve()
    try:
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and root in candidate.parents:
            return candidate
    except (OSError, ValueError):
        # 너무 긴 경로, NUL 문자 등 파일시스템이 거부하는 경로
        pass
    return root / ENTRY_DOCUMENT


# ✅ [FALLBACK] 매칭되지 않은 GET 요청 → 정적 파일 / SPA 진입 문서
# main.py 에서 가장 마지막에 등록해야 함
@router.get("/{full_path:path}", include_in_schema=False)
def serve_front(full_path: str):
    return FileResponse(resolve_static(full_path, settings.STATIC_DIR))
