"""FastAPI adapter exposing the analysis pipeline to the booking widget."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from skipper.config.loader import load_config
from skipper.config.schema import SkipperConfig
from skipper.errors import SkipperError
from skipper.models.analysis import AnalysisRequest
from skipper.models.common import MAX_EPOCH
from skipper.pipeline.analysis import AnalysisOrchestrator


class AnalyzeBody(BaseModel):
    model_config = {"extra": "forbid"}

    route_id: str
    # UTC epoch seconds, computed once by the client
    target_timestamp: int = Field(ge=0, le=MAX_EPOCH)


def create_app(
    config: SkipperConfig | None = None,
    orchestrator: AnalysisOrchestrator | None = None,
) -> FastAPI:
    config = config or load_config()
    orchestrator = orchestrator or AnalysisOrchestrator.from_config(config)

    app = FastAPI(title="AI Skipper", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    @app.get("/api/routes")
    def list_routes():
        """Routes available for booking."""
        return [
            {"route_id": r.route_id, "name": r.name}
            for r in orchestrator.catalog.list_routes()
        ]

    @app.post("/api/analyze")
    def analyze(body: AnalyzeBody):
        request = AnalysisRequest(
            route_id=body.route_id, target_timestamp=body.target_timestamp
        )
        try:
            result = orchestrator.analyze(request)
        except SkipperError as e:
            return JSONResponse(status_code=e.status_code, content={"message": e.message})
        return result.to_payload()

    return app
