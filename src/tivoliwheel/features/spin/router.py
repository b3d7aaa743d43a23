from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, model_validator

from ...core.errors import AlreadySpinning
from ...render.svg import SVG_MEDIA_TYPE
from .service import SpinManager, WheelSpec

__all__ = ["CreateWheelRequest", "create_spin_router"]


class CreateWheelRequest(BaseModel):
    labels: list[str]
    duration_ms: float | None = None
    seed: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: dict[str, object]) -> dict[str, object]:
        if not isinstance(data, dict):
            return data
        cleaned: dict[str, object] = dict(data)
        labels = cleaned.get("labels")
        if isinstance(labels, str):
            cleaned["labels"] = [part.strip() for part in labels.splitlines() if part.strip()]
        for field in ("duration_ms", "seed"):
            if cleaned.get(field) in (None, ""):
                cleaned[field] = None
        return cleaned


class _SpinController:
    def __init__(self, manager: SpinManager) -> None:
        self.manager = manager

    def _json_response(self, data: dict[str, object], status_code: int = 200) -> JSONResponse:
        return JSONResponse(data, status_code=status_code)

    async def create(self, body: CreateWheelRequest) -> Response:
        spec = WheelSpec(labels=body.labels, duration_ms=body.duration_ms, seed=body.seed)
        try:
            wheel_id = await self.manager.create_wheel_async(spec)
        except ValueError as exc:
            raise HTTPException(400, str(exc)) from exc
        return self._json_response({"wheel": wheel_id}, status_code=201)

    async def layout(self, wid: str) -> Response:
        try:
            payload = await self.manager.layout_async(wid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        return self._json_response(payload.to_dict())

    async def svg(self, wid: str, rotation: float | None) -> Response:
        try:
            document = await self.manager.svg_async(wid, rotation)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        return Response(document, media_type=SVG_MEDIA_TYPE)

    async def spin(self, wid: str) -> Response:
        try:
            payload = await self.manager.spin_async(wid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        except AlreadySpinning as exc:
            raise HTTPException(409, str(exc)) from exc
        return self._json_response(payload.to_dict())

    async def poll(self, wid: str, now: float | None) -> Response:
        try:
            payload = await self.manager.poll_async(wid, now)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        return self._json_response(payload.to_dict())

    async def shuffle(self, wid: str) -> Response:
        try:
            payload = await self.manager.shuffle_async(wid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        except AlreadySpinning as exc:
            raise HTTPException(409, str(exc)) from exc
        return self._json_response(payload.to_dict())

    async def discard(self, wid: str) -> Response:
        try:
            await self.manager.discard_async(wid)
        except KeyError as exc:
            raise HTTPException(404, str(exc)) from exc
        return Response(status_code=204)


def create_spin_router(manager: SpinManager) -> APIRouter:
    controller = _SpinController(manager)
    router = APIRouter(prefix="/api/v1/wheel", tags=["wheel"])

    @router.post("")
    async def create_wheel(body: CreateWheelRequest) -> Response:
        return await controller.create(body)

    @router.get("/{wid}")
    async def get_wheel(wid: str) -> Response:
        return await controller.layout(wid)

    @router.delete("/{wid}")
    async def delete_wheel(wid: str) -> Response:
        return await controller.discard(wid)

    @router.get("/{wid}/svg")
    async def get_svg(wid: str, rotation: float | None = None) -> Response:
        return await controller.svg(wid, rotation)

    @router.post("/{wid}/spin")
    async def post_spin(wid: str) -> Response:
        return await controller.spin(wid)

    @router.get("/{wid}/poll")
    async def get_poll(wid: str, now: float | None = None) -> Response:
        return await controller.poll(wid, now)

    @router.post("/{wid}/shuffle")
    async def post_shuffle(wid: str) -> Response:
        return await controller.shuffle(wid)

    return router
