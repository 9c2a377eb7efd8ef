"""테스트 공통 fixture"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.domain.notification.schemas import Commit, Repository
from app.main import app

SAMPLE_DIFF = """diff --git a/src/login.js b/src/login.js
index 1a2b3c4..5d6e7f8 100644
--- a/src/login.js
+++ b/src/login.js
@@ -1,7 +1,7 @@
 const form = document.querySelector('#login');
 const button = form.querySelector('button');
-button.disabled = true;
+button.disabled = false;
 form.addEventListener('submit', submit);
 export default form;
 // end"""


@pytest.fixture
def sample_repository() -> Repository:
    """테스트용 레포지토리"""
    return Repository(
        name="testrepo",
        full_name="testuser/testrepo",
        html_url="https://github.com/testuser/testrepo",
    )


@pytest.fixture
def sample_commits() -> list[Commit]:
    """테스트용 커밋 리스트"""
    return [
        Commit(id="abc123", message="Fix login bug\n\nButton stayed disabled"),
        Commit(id="def456", message="Add test"),
        Commit(id="ghi789", message="Update docs"),
    ]


@pytest.fixture
def sample_diff() -> str:
    """테스트용 unified diff"""
    return SAMPLE_DIFF


@pytest.fixture
def compare_url() -> str:
    return "https://github.com/testuser/testrepo/compare/abc123...ghi789"


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def mock_chunked_log():
    """백그라운드 청크 로깅 mock"""
    with patch("app.infra.llm.client.schedule_chunked_log") as mock:
        yield mock


@pytest.fixture
def mock_summary_text():
    """LLM 원본 응답 생성 mock"""
    with patch(
        "app.domain.notification.service.generate_summary_text", new_callable=AsyncMock
    ) as mock:
        yield mock


@pytest.fixture
def mock_httpx_client():
    """httpx.AsyncClient mock - async with 지원"""
    with patch("app.infra.llm.openrouter_client.httpx.AsyncClient") as mock_cls:
        instance = MagicMock()
        instance.post = AsyncMock()
        mock_cls.return_value.__aenter__ = AsyncMock(return_value=instance)
        mock_cls.return_value.__aexit__ = AsyncMock(return_value=False)
        yield instance


@pytest.fixture
def make_openrouter_response():
    """OpenRouter 응답 생성 helper"""

    def _create(status_code: int = 200, content: str | None = None, text: str | None = None):
        request = httpx.Request("POST", "https://openrouter.ai/api/v1/chat/completions")
        if content is not None:
            return httpx.Response(
                status_code,
                json={"choices": [{"message": {"role": "assistant", "content": content}}]},
                request=request,
            )
        return httpx.Response(status_code, text=text or "", request=request)

    return _create
