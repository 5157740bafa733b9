"""
config/settings.py

- .env에 정의한 환경변수를 읽어 애플리케이션 전역 설정으로 제공합니다.
- pydantic v2 / pydantic-settings v2 사용.
- 데이터 파일 경로는 실행 환경에 따라 달라집니다.
  RENDER=true 이면 쓰기 가능한 /tmp 경로를, 아니면 저장소의 data/students.json 을 사용(@computed_field).
"""

from pathlib import Path
from typing import List, Literal, Union
from pydantic import field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # =========================
    # 앱/런타임
    # =========================
    APP_TITLE: str = "SIMS API"
    APP_DESCRIPTION: str = "Student Information Management System backend"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # =========================
    # CORS
    # =========================
    # 콤마(,)로 구분된 문자열 → List[str] 로 파싱
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            # "a,b , c" → ["a","b","c"]
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    # =========================
    # Storage (JSON file)
    # =========================
    LOCAL_DATA_PATH: Path = BASE_DIR / "data" / "students.json"
    RENDER: bool = False
    RENDER_DATA_PATH: Path = Path("/tmp") / "students.json"

    @computed_field  # type: ignore[misc]
    @property
    def DATA_PATH(self) -> Path:
        """
        실제로 읽고 쓰는 학생 데이터 파일.
        Render 환경에서는 저장소 디렉터리가 읽기 전용이므로 /tmp 사본을 사용.
        """
        return self.RENDER_DATA_PATH if self.RENDER else self.LOCAL_DATA_PATH

    # =========================
    # Front (정적 파일)
    # =========================
    STATIC_DIR: Path = BASE_DIR / "static"

    # =========================
    # Logging / Misc
    # =========================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # =========================
    # BaseSettings Config
    # =========================
    model_config = SettingsConfigDict(
        env_file=".env",               # .env에서 값 로드
        env_file_encoding="utf-8",
        case_sensitive=False,          # 환경변수 대소문자 비구분
        extra="ignore",                # 정의되지 않은 키는 무시
    )


# ✅ settings 객체를 통해 어디서든 접근 가능
settings = Settings()
