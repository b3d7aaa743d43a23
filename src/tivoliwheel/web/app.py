from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.openapi.utils import get_openapi
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from ..core.partition import partition
from ..features.spin import SpinManager, create_spin_router
from ..render.svg import render_wheel_svg

logger = logging.getLogger(__name__)

SAMPLE_LABELS: tuple[str, ...] = ("Pizza", "Pasta", "Salad", "Soup", "Steak")

app = FastAPI(title="Tivoli Wheel")
_manager = SpinManager()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

app.include_router(create_spin_router(_manager))


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index(request: Request) -> Response:
    wheel_svg = render_wheel_svg(partition(SAMPLE_LABELS), title="Tivoli Wheel")
    return templates.TemplateResponse(
        request,
        "index.html",
        {"labels": SAMPLE_LABELS, "wheel_svg": wheel_svg},
    )


def _custom_openapi() -> dict[str, object]:  # pragma: no cover - exercised via docs
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version="1.0.0",
        description=app.description,
        routes=app.routes,
    )
    app.openapi_schema = schema
    return schema


app.openapi = _custom_openapi  # type: ignore[assignment]
app.openapi_schema = None


def main(host: str | None = None, port: int | None = None) -> None:  # pragma: no cover - runner
    import uvicorn

    bind = host or os.environ.get("BIND", "0.0.0.0")
    listen = port or int(os.environ.get("PORT", "8000"))
    logger.info("Serving wheel on %s:%s", bind, listen)
    uvicorn.run(app, host=bind, port=listen, factory=False)


if __name__ == "__main__":  # pragma: no cover
    main()
