import pytest
import httpx


async def _log(client, occasion, confidence, **tags):
    outfit = (await client.post("/v1/outfits", json={"tags": {"occasion": [occasion], **tags}})).json()["outfit"]
    await client.post(
        f"/v1/outfits/{outfit['id']}/rating",
        json={"confidence": confidence, "comfort": 7, "success": confidence},
    )
    return outfit


@pytest.mark.asyncio
async def test_empty_history_endpoints(client: httpx.AsyncClient):
    patterns = await client.get("/v1/analysis/patterns")
    assert patterns.status_code == 200
    assert patterns.json()["insights"] == []
    assert (await client.get("/v1/analysis/gaps")).json() == []
    report = await client.get("/v1/analysis/report/monthly")
    assert report.status_code == 200
    assert report.json()["metrics"]["total_outfits"] == 0
    assert (await client.get("/v1/analysis/go-to")).json() == []


@pytest.mark.asyncio
async def test_patterns_and_go_to(client: httpx.AsyncClient):
    best = await _log(client, "work", 9, style=["classic"])
    await _log(client, "casual", 6, style=["bohemian"])
    await _log(client, "formal", 3)

    patterns = (await client.get("/v1/analysis/patterns", params={"time_period": "week"})).json()
    assert patterns["outfits_analyzed"] == 3
    assert {i["category"] for i in patterns["insights"]} >= {"Confidence", "Occasion Confidence"}

    picks = (await client.get("/v1/analysis/go-to", params={"metric": "confidence"})).json()
    assert [p["outfit_id"] for p in picks] == [best["id"]]

    gaps = (await client.get("/v1/analysis/gaps", params={"focus_area": "formal"})).json()
    assert gaps[0]["category"] == "formal outfits"
    assert gaps[0]["priority"] == "high"


@pytest.mark.asyncio
async def test_predict(client: httpx.AsyncClient):
    await _log(client, "work", 8, style=["classic"], colors=["navy"])
    resp = await client.post(
        "/v1/analysis/predict",
        json={"tags": {"occasion": ["work"], "style": ["classic"], "colors": ["navy", "gray"]}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["color_harmony"] == 0.9
    assert body["similar_outfits"] == 1
    assert body["estimated_confidence"] == 8.0


@pytest.mark.asyncio
async def test_invalid_period_rejected(client: httpx.AsyncClient):
    resp = await client.get("/v1/analysis/patterns", params={"time_period": "decade"})
    assert resp.status_code == 422
