"""Tests for the FastAPI surface: infrastructure and referee endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from referee.api.dependencies import get_engine
from referee.api.main import app
from referee.engine.evaluator import RefereeEngine
from referee.models.evaluation import DecisionRule, OptionImpact, RuleImpacts
from referee.rules.table import RuleTable

BEGINNER_LARGE = {
    "expertise": "beginner",
    "scale": "large",
    "timeToMarket": "fast",
    "riskTolerance": "low",
}


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
async def client() -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
    app.dependency_overrides.clear()


class TestHealthEndpoint:
    """GET /health returns status ok."""

    @pytest.mark.anyio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.status_code == 200

    @pytest.mark.anyio
    async def test_health_response_body(self, client: AsyncClient) -> None:
        data = (await client.get("/health")).json()
        assert data["status"] == "ok"
        assert "environment" in data


class TestVersionEndpoint:
    """GET /api/version returns application version info."""

    @pytest.mark.anyio
    async def test_version_response_body(self, client: AsyncClient) -> None:
        response = await client.get("/api/version")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "API Referee"
        assert "version" in data


class TestConstraintsEndpoint:
    """GET /v1/referee/constraints lists the closed domain."""

    @pytest.mark.anyio
    async def test_dimensions_in_order(self, client: AsyncClient) -> None:
        data = (await client.get("/v1/referee/constraints")).json()
        assert [d["key"] for d in data] == [
            "expertise",
            "scale",
            "timeToMarket",
            "riskTolerance",
        ]

    @pytest.mark.anyio
    async def test_options(self, client: AsyncClient) -> None:
        data = (await client.get("/v1/referee/constraints")).json()
        time_to_market = data[2]
        assert time_to_market["label"] == "Time-to-Market"
        assert time_to_market["options"] == [
            {"value": "fast", "label": "Fast"},
            {"value": "balanced", "label": "Balanced"},
        ]


class TestRulesEndpoint:
    """GET /v1/referee/rules returns the catalogue in table order."""

    @pytest.mark.anyio
    async def test_catalogue(self, client: AsyncClient) -> None:
        data = (await client.get("/v1/referee/rules")).json()
        assert data["rule_count"] == 26
        assert len(data["rules"]) == 26
        assert data["rules"][0]["id"] == "EXP_BEGINNER_REST"

    @pytest.mark.anyio
    async def test_compound_rule_entry(self, client: AsyncClient) -> None:
        data = (await client.get("/v1/referee/rules")).json()
        rule = next(r for r in data["rules"] if r["id"] == "COMPOUND_LARGE_BEGINNER")
        assert rule["when"] == {"scale": "large", "expertise": "beginner"}
        assert rule["trigger_label"] == "Large scale + Beginner expertise"
        assert rule["affected_options"] == ["graphql", "grpc"]
        assert rule["specificity"] == 2


class TestEvaluateEndpoint:
    """POST /v1/referee/evaluate validates and evaluates."""

    @pytest.mark.anyio
    async def test_valid_request(self, client: AsyncClient) -> None:
        response = await client.post("/v1/referee/evaluate", json=BEGINNER_LARGE)
        assert response.status_code == 200
        data = response.json()
        assert data["summary"] == "Beginner team · Large scale · Fast delivery · Low risk"
        assert data["constraints"] == BEGINNER_LARGE
        assert data["result"]["total_rules_evaluated"] == 26
        assert data["result"]["total_rules_triggered"] == 15
        assert "compounding pressure" in data["insight"]

    @pytest.mark.anyio
    async def test_response_casing(self, client: AsyncClient) -> None:
        data = (await client.post("/v1/referee/evaluate", json=BEGINNER_LARGE)).json()
        assert set(data["constraints"]) == {"expertise", "scale", "timeToMarket", "riskTolerance"}
        assert set(data["result"]) == {
            "rest",
            "graphql",
            "grpc",
            "total_rules_evaluated",
            "total_rules_triggered",
            "triggered_rule_ids",
        }
        assert "triggered_rules" in data["result"]["rest"]

    @pytest.mark.anyio
    async def test_trace_serialization(self, client: AsyncClient) -> None:
        data = (await client.post("/v1/referee/evaluate", json=BEGINNER_LARGE)).json()
        trace = data["result"]["grpc"]["triggered_rules"][-1]
        assert trace["rule_id"] == "COMPOUND_BEGINNER_FAST"
        assert trace["affected_options"] == ["rest", "graphql", "grpc"]
        assert trace["contributed_categories"] == ["trade-off"]

    @pytest.mark.anyio
    async def test_invalid_value_returns_422(self, client: AsyncClient) -> None:
        response = await client.post(
            "/v1/referee/evaluate", json={**BEGINNER_LARGE, "scale": "huge"}
        )
        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail == ["'scale' must be one of [small, medium, large], got 'huge'"]

    @pytest.mark.anyio
    async def test_missing_dimension_returns_422(self, client: AsyncClient) -> None:
        candidate = {k: v for k, v in BEGINNER_LARGE.items() if k != "riskTolerance"}
        response = await client.post("/v1/referee/evaluate", json=candidate)
        assert response.status_code == 422
        assert "missing 'riskTolerance'" in response.json()["detail"]

    @pytest.mark.anyio
    async def test_engine_override(self, client: AsyncClient) -> None:
        table = RuleTable([
            DecisionRule(
                id="ONLY",
                description="single rule",
                when={"scale": "large"},
                impacts=RuleImpacts(rest=OptionImpact(weaknesses=["w"])),
            )
        ])
        app.dependency_overrides[get_engine] = lambda: RefereeEngine(table)
        data = (await client.post("/v1/referee/evaluate", json=BEGINNER_LARGE)).json()
        assert data["result"]["total_rules_evaluated"] == 1
        assert data["result"]["rest"]["weaknesses"] == ["w"]


class TestSummaryEndpoint:
    """POST /v1/referee/summary."""

    @pytest.mark.anyio
    async def test_summary(self, client: AsyncClient) -> None:
        response = await client.post(
            "/v1/referee/summary",
            json={**BEGINNER_LARGE, "expertise": "expert"},
        )
        assert response.status_code == 200
        assert response.json()["summary"] == (
            "Expert team · Large scale · Fast delivery · Low risk"
        )

    @pytest.mark.anyio
    async def test_summary_rejects_invalid(self, client: AsyncClient) -> None:
        response = await client.post("/v1/referee/summary", json={"expertise": "expert"})
        assert response.status_code == 422
