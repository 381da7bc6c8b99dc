"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from reforma.engine import ENGINE_VERSION
from reforma.exceptions import ConfigurationError, InvalidInputError
from reforma.models.project import ProjectInput, RoomInput  # noqa: TCH001 (FastAPI resolves at runtime)

if TYPE_CHECKING:
    from reforma.engine import CostEngine

logger = logging.getLogger(__name__)


def _sample_project() -> ProjectInput:
    return ProjectInput(
        location="Spain",
        city="Madrid",
        property_age="21 - 25 Years",
        property_type="Apartment",
        property_condition="Average (needs updating)",
        access_difficulty="Moderate (stairs up to 3rd floor)",
        urgency="Standard (1-3 months)",
        rooms=[
            RoomInput(
                room_type="Kitchen",
                width=3.0,
                length=4.0,
                floor_finish="Tile (Porcelain)",
                wall_finish="Tile",
                built_in_furniture="Kitchen Cabinets (Standard)",
            ),
            RoomInput(
                room_type="Bathroom",
                width=2.0,
                length=2.5,
                floor_finish="Tile (Ceramic)",
                wall_finish="Tile",
                built_in_furniture="Bathroom Vanity",
            ),
            RoomInput(
                room_type="Living Room",
                width=4.5,
                length=5.0,
                ceiling_height="High (2.8 - 3.2m)",
                floor_finish="Engineered Wood",
                wall_finish="Paint (Premium)",
            ),
            RoomInput(
                room_type="Walk-in Closet",
                width=1.2,
                length=1.5,
                floor_finish="Laminate",
                wall_finish="Paint (Standard)",
                built_in_furniture="Custom Closets",
            ),
        ],
    )


def create_app(*, cost_engine: CostEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    cost_engine
        Optional pre-built cost engine (e.g. tests). If not provided, one is
        created on first request from ``REFORMA_*`` environment variables.
    """
    app = FastAPI(title="reforma", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:8081"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own engine
    app.state.cost_engine = cost_engine

    def _get_cost_engine() -> CostEngine:
        eng: CostEngine | None = app.state.cost_engine
        if eng is not None:
            return eng
        from reforma.config import PricingConfig
        from reforma.factory import create_default_engine

        eng = create_default_engine(PricingConfig.from_env())
        app.state.cost_engine = eng
        return eng

    def _run_estimate(project: ProjectInput) -> dict[str, Any]:
        engine = _get_cost_engine()
        try:
            result = engine.estimate(project)
        except InvalidInputError as exc:
            logger.warning("Rejected estimate request: %s", exc)
            raise HTTPException(
                status_code=422,
                detail={
                    "error": "invalid_input",
                    "field": exc.field,
                    "message": exc.message,
                },
            ) from exc
        except ConfigurationError as exc:
            logger.warning("Unrecognized option in estimate request: %s", exc)
            raise HTTPException(
                status_code=422,
                detail={
                    "error": "unrecognized_option",
                    "category": exc.category,
                    "label": exc.label,
                    "message": str(exc),
                },
            ) from exc
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "version": ENGINE_VERSION,
            "pricing_version": _get_cost_engine().config.pricing_version,
        }

    # ------------------------------------------------------------------
    # GET /api/options
    # ------------------------------------------------------------------

    @app.get("/api/options")
    def options() -> dict[str, Any]:
        repository = _get_cost_engine().repository
        locations = repository.options()["location"]
        return {
            "options": repository.options(),
            "cities": {
                country: repository.cities_for_country(country)
                for country in locations
            },
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(project: ProjectInput) -> dict[str, Any]:
        return _run_estimate(project)

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        project = _sample_project()
        response = _run_estimate(project)
        response["project"] = project.model_dump(mode="json")
        return response

    return app
