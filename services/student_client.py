import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


class StudentAPIError(Exception):
    """서버가 실패 응답을 주었거나 서버에 닿지 못함"""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail  # 서버가 보낸 {"error": "..."} 메시지


class StudentAPIClient:
    """
    /students API 호출용 HTTP 클라이언트
    - client 를 주입하면(예: FastAPI TestClient) 그대로 사용
    - 아니면 호출마다 httpx.Client 를 열고 닫음
    """

    def __init__(self, base_url: str = "", timeout: float = 10, client: Optional[httpx.Client] = None):
        self.base = base_url.rstrip("/")
        self.timeout = timeout
        self.client = client

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base}{path}"
        try:
            if self.client is not None:
                r = self.client.request(method, url, **kwargs)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    r = client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise StudentAPIError(f"Could not reach server: {e}") from e

        if r.is_error:
            detail = _error_detail(r)
            raise StudentAPIError(detail or f"HTTP {r.status_code}", status_code=r.status_code, detail=detail)

        try:
            return r.json()
        except ValueError as e:
            raise StudentAPIError("Server returned an invalid response.", status_code=r.status_code) from e

    # 필요 엔드포인트에 맞춰 메서드 노출
    def list_students(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/students")

    def create_student(self, record: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/students", json=record)

    def delete_student(self, student_id: str) -> Dict[str, Any]:
        data = self._request("DELETE", f"/students/{quote(str(student_id), safe='')}")
        return data.get("removed", {})


def _error_detail(response: httpx.Response) -> Optional[str]:
    # 서버 에러 본문은 {"error": "..."} 형태
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None
