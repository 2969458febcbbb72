# tests/integration/test_api_endpoints.py
import copy
import math

import pytest
from fastapi.testclient import TestClient

from content_api.api.main import create_app
from content_api.core.config import get_default_config


@pytest.fixture
def catalog_client():
    """Application started the normal way, loading the bundled catalog"""
    app = create_app(config=copy.deepcopy(get_default_config()))
    with TestClient(app) as client:
        yield client


@pytest.mark.integration
class TestAPIEndpoints:
    """Integration tests against the shipped resource catalog"""

    def test_health_endpoint(self, catalog_client):
        response = catalog_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_walk_all_pages(self, catalog_client):
        """Test paging through every theme yields each one exactly once"""
        first = catalog_client.get("/resources", params={"type": "theme", "limit": 2}).json()
        total = first["meta"]["total"]
        assert first["meta"]["pages"] == math.ceil(total / 2)

        seen = []
        for page in range(1, first["meta"]["pages"] + 1):
            body = catalog_client.get(
                "/resources", params={"type": "theme", "limit": 2, "page": page}
            ).json()
            assert body["meta"]["total"] == total
            seen.extend(item["id"] for item in body["data"])

        assert len(seen) == total
        assert len(set(seen)) == total

    def test_sorted_by_downloads(self, catalog_client):
        body = catalog_client.get(
            "/resources", params={"sort_by": "download_count", "order": "desc", "limit": 50}
        ).json()

        counts = [item["download_count"] for item in body["data"]]
        assert counts == sorted(counts, reverse=True)

    def test_platform_filter(self, catalog_client):
        body = catalog_client.get("/resources", params={"platform": "macos", "limit": 50}).json()

        assert body["data"]
        assert {item["platform"] for item in body["data"]} <= {"macos", "all"}

    def test_detail_matches_listing(self, catalog_client):
        listing = catalog_client.get("/resources", params={"limit": 1}).json()
        item = listing["data"][0]

        detail = catalog_client.get(f"/resources/{item['id']}")

        assert detail.status_code == 200
        assert detail.json() == item

    def test_conditional_get_round_trip(self, catalog_client):
        response = catalog_client.get("/resources/midnight-theme")
        etag = response.headers["etag"]

        cached = catalog_client.get("/resources/midnight-theme", headers={"If-None-Match": etag})

        assert cached.status_code == 304
