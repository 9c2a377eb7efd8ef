"""알림 API 엔드포인트 테스트"""

import pytest

from app.api.v1.schemas import GenerateNotificationRequest
from app.core.context import get_delivery_id, get_request_id
from app.core.exceptions import ProviderError


@pytest.fixture
def request_body(sample_diff, compare_url) -> dict:
    """테스트용 요청 본문"""
    return {
        "commits": [
            {"id": "abc123", "message": "Fix login bug\n\ndetails", "author": {"name": "dev"}},
            {"id": "def456", "message": "Add test"},
        ],
        "repository": {
            "name": "testrepo",
            "full_name": "testuser/testrepo",
            "html_url": "https://github.com/testuser/testrepo",
            "private": False,
        },
        "diff": sample_diff,
        "compareUrl": compare_url,
        "provider": "openrouter",
        "apiKey": "or-key",
    }


class TestGenerateNotificationEndpoint:
    """POST /api/v1/notifications/generate 테스트"""

    @pytest.mark.asyncio
    async def test_success(self, async_client, mock_summary_text, request_body):
        """메시지와 임베드 반환"""
        mock_summary_text.return_value = '{"summary": "Sign in fixed", "changes": ["Login works"]}'

        async with async_client as client:
            response = await client.post("/api/v1/notifications/generate", json=request_body)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Update summary: Sign in fixed\n\n• Login works"
        assert data["embed"]["description"] == data["message"]
        assert [f["name"] for f in data["embed"]["fields"]] == ["Repository", "View Changes"]
        assert "X-Request-ID" in response.headers

    @pytest.mark.asyncio
    async def test_hide_links(self, async_client, mock_summary_text, request_body):
        """hideLinks면 fields 키 없음"""
        mock_summary_text.return_value = '{"summary": "ok", "changes": []}'
        request_body["hideLinks"] = True

        async with async_client as client:
            response = await client.post("/api/v1/notifications/generate", json=request_body)

        assert response.status_code == 200
        assert "fields" not in response.json()["embed"]

    @pytest.mark.asyncio
    async def test_backend_failure_still_returns_message(
        self, async_client, mock_summary_text, request_body
    ):
        """백엔드 실패 시에도 fallback 메시지로 200 응답"""
        mock_summary_text.side_effect = ProviderError("openrouter", upstream_status=502)

        async with async_client as client:
            response = await client.post("/api/v1/notifications/generate", json=request_body)

        assert response.status_code == 200
        assert response.json()["message"] == "Fix login bug (+1 more)"

    @pytest.mark.asyncio
    async def test_unsupported_provider_falls_back(self, async_client, request_body):
        """지원하지 않는 프로바이더도 fallback 메시지"""
        request_body["provider"] = "anthropic"
        request_body["commits"] = request_body["commits"][:1]

        async with async_client as client:
            response = await client.post("/api/v1/notifications/generate", json=request_body)

        assert response.status_code == 200
        assert response.json()["message"] == "Fix login bug"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value",
        [
            ("commits", []),
            ("apiKey", ""),
            ("compareUrl", "not-a-url"),
        ],
        ids=["no_commits", "empty_key", "bad_compare_url"],
    )
    async def test_invalid_request(self, async_client, request_body, field, value):
        """잘못된 요청은 422"""
        request_body[field] = value

        async with async_client as client:
            response = await client.post("/api/v1/notifications/generate", json=request_body)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_delivery_id_header_reaches_context(
        self, async_client, mock_summary_text, request_body
    ):
        """X-Delivery-ID 헤더가 요청 처리 중 컨텍스트에 설정됨"""
        seen = {}

        def _capture(*args, **kwargs):
            seen["delivery_id"] = get_delivery_id()
            seen["request_id"] = get_request_id()
            return '{"summary": "ok", "changes": []}'

        mock_summary_text.side_effect = _capture

        async with async_client as client:
            response = await client.post(
                "/api/v1/notifications/generate",
                json=request_body,
                headers={"X-Delivery-ID": "gh-delivery-1", "X-Request-ID": "req-77"},
            )

        assert response.status_code == 200
        assert seen == {"delivery_id": "gh-delivery-1", "request_id": "req-77"}
        assert response.headers["X-Request-ID"] == "req-77"


class TestGenerateNotificationRequest:
    """GenerateNotificationRequest 스키마 테스트"""

    def test_accepts_field_names_and_aliases(self, request_body):
        """camelCase 별칭과 필드 이름 모두 허용"""
        by_alias = GenerateNotificationRequest.model_validate(request_body)
        by_name = GenerateNotificationRequest(
            commits=request_body["commits"],
            repository=request_body["repository"],
            compare_url=request_body["compareUrl"],
            provider="gemini",
            api_key="gm-key",
            hide_links=True,
        )

        assert by_alias.api_key == "or-key"
        assert by_alias.hide_links is False
        assert by_name.compare_url == request_body["compareUrl"]
        assert by_name.hide_links is True
