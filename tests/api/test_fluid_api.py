"""
Tests for the Fluid API routes: stylesheet, compile and decompile.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fluidkit.adapters.preset_store import InMemoryPresetStore
from fluidkit.api.deps import get_preset_store, get_rules
from fluidkit.api.routes import fluid
from fluidkit.domain.entities import ParsedValue, Preset, PresetGroup
from fluidkit.rules.models import BreakpointRules, FluidRules

# --- Test Setup ---


class BrokenPresetStore:
    def list_groups(self) -> list[PresetGroup]:
        raise ValueError("corrupt preset file")


@pytest.fixture
def store() -> InMemoryPresetStore:
    return InMemoryPresetStore(
        [
            PresetGroup(
                name="Spacing",
                control_id="fluid_spacing_presets",
                presets=[
                    Preset(id="s1", title="Small", min=ParsedValue(magnitude="8"), max=ParsedValue(magnitude="16")),
                    Preset(id="s2", title="Fixed", min=ParsedValue(magnitude="4"), max=ParsedValue(magnitude="4")),
                ],
            )
        ]
    )


@pytest.fixture
def app(store: InMemoryPresetStore) -> FastAPI:
    """Test FastAPI app with fluid routes and in-memory presets."""
    app = FastAPI()
    app.include_router(fluid.router, prefix="/api/fluid")
    app.include_router(fluid.css_router, prefix="/fluid")
    app.dependency_overrides[get_rules] = lambda: FluidRules()
    app.dependency_overrides[get_preset_store] = lambda: store
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


# --- Stylesheet ---


class TestVariablesCss:
    def test_serves_root_block(self, client: TestClient) -> None:
        response = client.get("/fluid/variables.css")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")
        assert response.text.startswith(":root {")
        assert "--fluid-min-screen: 360px;" in response.text
        assert "--fluid-preset--s1: clamp(min(8px, 16px)" in response.text
        assert "--fluid-preset--s2: 4px;" in response.text

    def test_custom_breakpoints(self, app: FastAPI, client: TestClient) -> None:
        app.dependency_overrides[get_rules] = lambda: FluidRules(
            breakpoints=BreakpointRules(min_screen_width=400, max_screen_width=1600)
        )
        response = client.get("/fluid/variables.css")
        assert "--fluid-max-screen: 1600px;" in response.text
        assert "(1600 - 400)" in response.text

    def test_store_failure(self, app: FastAPI, client: TestClient) -> None:
        app.dependency_overrides[get_preset_store] = BrokenPresetStore
        response = client.get("/fluid/variables.css")
        assert response.status_code == 503


# --- Compile ---


class TestCompile:
    def test_compile_with_global_range(self, client: TestClient) -> None:
        response = client.post("/api/fluid/compile", json={"min": "20px", "max": "40px", "preset_id": "p1"})
        assert response.status_code == 200
        data = response.json()
        assert data["formula"].startswith("clamp(min(20px, 40px), ")
        assert "(1920 - 360)" in data["formula"]
        assert data["screen_range"] == {"min_screen_px": 360, "max_screen_px": 1920}
        assert data["variable_name"] == "--fluid-preset--p1"

    def test_compile_custom_range(self, client: TestClient) -> None:
        response = client.post(
            "/api/fluid/compile",
            json={"min": "1rem", "max": "2rem", "screen_range": {"min_screen_px": 400, "max_screen_px": 1600}},
        )
        assert response.status_code == 200
        assert "(100vw - 400px) / (1600 - 400)" in response.json()["formula"]

    def test_compile_equal_values(self, client: TestClient) -> None:
        response = client.post("/api/fluid/compile", json={"min": "20px", "max": "20px"})
        assert response.json()["formula"] == "20px"
        assert response.json()["variable_name"] is None

    def test_invalid_value(self, client: TestClient) -> None:
        response = client.post("/api/fluid/compile", json={"min": "twenty", "max": "40px"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid value format"

    def test_zero_pair(self, client: TestClient) -> None:
        response = client.post("/api/fluid/compile", json={"min": "0", "max": "0"})
        assert response.status_code == 400

    def test_degenerate_range(self, client: TestClient) -> None:
        response = client.post(
            "/api/fluid/compile",
            json={"min": "10px", "max": "20px", "screen_range": {"min_screen_px": 900, "max_screen_px": 900}},
        )
        assert response.status_code == 400
        assert "Degenerate screen range" in response.json()["detail"]

    def test_invalid_preset_id(self, client: TestClient) -> None:
        response = client.post("/api/fluid/compile", json={"min": "10px", "max": "20px", "preset_id": "a}b"})
        assert response.status_code == 400
        assert "Invalid preset id" in response.json()["detail"]


# --- Decompile ---


class TestDecompile:
    def test_round_trip(self, client: TestClient) -> None:
        compiled = client.post("/api/fluid/compile", json={"min": "80px", "max": "20px"}).json()
        response = client.post("/api/fluid/decompile", json={"formula": compiled["formula"]})
        assert response.status_code == 200
        assert response.json() == {
            "min": "80px",
            "max": "20px",
            "screen_range": {"min_screen_px": 360, "max_screen_px": 1920},
        }

    def test_bare_value(self, client: TestClient) -> None:
        response = client.post("/api/fluid/decompile", json={"formula": "1.5rem"})
        assert response.json() == {"min": "1.5rem", "max": "1.5rem", "screen_range": None}

    def test_foreign_formula(self, client: TestClient) -> None:
        response = client.post("/api/fluid/decompile", json={"formula": "clamp(1rem, 2vw, 3rem)"})
        assert response.status_code == 400
