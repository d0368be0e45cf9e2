"""FastAPI entrypoint and HTTP routes."""

from dataclasses import replace

from fastapi import FastAPI, HTTPException

from dominant_color import __version__
from dominant_color.api.schemas import DominantColorRequest, DominantColorResponse
from dominant_color.config.settings import get_settings
from dominant_color.errors import InvalidArgumentError
from dominant_color.imgproc.color_extract import CalculationConfig, DominantColorCalculator
from dominant_color.imgproc.pixels import PixelBuffer
from dominant_color.monitoring.logging import configure_logging

_OVERRIDABLE_FIELDS = (
    "strategy",
    "saturation_threshold",
    "brightness_threshold",
    "smooth_factor",
    "saturation",
    "value",
)


def create_app() -> FastAPI:
    """Initialise the FastAPI application."""

    configure_logging()
    settings = get_settings()
    app = FastAPI(
        title="Dominant Color API",
        version=__version__,
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )
    calculator = DominantColorCalculator()

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.post("/dominant-color", response_model=DominantColorResponse, tags=["color"])
    def dominant_color(request: DominantColorRequest) -> DominantColorResponse:
        """Return the dominant colour of a decoded image."""

        overrides = {
            name: getattr(request, name)
            for name in _OVERRIDABLE_FIELDS
            if getattr(request, name) is not None
        }
        try:
            config = replace(CalculationConfig.from_settings(), **overrides)
            pixels = PixelBuffer.from_flat(request.width, request.height, request.pixels)
            result = calculator.analyze(pixels, config)
        except InvalidArgumentError as exc:
            raise HTTPException(
                status_code=422,
                detail=str(exc),
            ) from exc

        return DominantColorResponse(
            color=result.color.as_tuple(),
            hex=result.color.to_hex(),
            strategy=result.strategy,
            dominant_hue=result.dominant_hue,
            fallback=result.fallback,
        )

    return app


app = create_app()
