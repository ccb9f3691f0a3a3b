"""
API routes for the digital net builder.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from typing import Any, Optional

from core import NetConstruction, NetError, OutputStyle
from services.net_service import NetService


router = APIRouter(prefix="/api")

# Singleton service, created in main.py and attached here
_service: Optional[NetService] = None


def init_service(svc: NetService) -> None:
    global _service
    _service = svc


def svc() -> NetService:
    if _service is None:
        raise RuntimeError("NetService not initialized")
    return _service


# ------------------------------------------------------------------
# Request / response models
# ------------------------------------------------------------------

class CreateRequest(BaseModel):
    net_id: str
    construction: str  # "sobol", "polynomial", "explicit" or "lms"
    size: Optional[dict] = None
    values: list[Any] = []


class ExtendRequest(BaseModel):
    new_id: str
    value: Any = None


class RandomExtendRequest(BaseModel):
    new_id: str


class ValidateRequest(BaseModel):
    value: Any


class SaveRequest(BaseModel):
    file_path: str
    style: str = "net"
    interlacing_factor: int = 1


class LoadRequest(BaseModel):
    net_id: str
    file_path: str
    num_rows: Optional[int] = None


def _style(value: str) -> OutputStyle:
    try:
        return OutputStyle(value)
    except ValueError:
        raise HTTPException(400, f"Unknown output style: {value}")


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.post("/nets")
def create_net(req: CreateRequest):
    """Build a net from a size parameter and generating values."""
    try:
        construction = NetConstruction(req.construction)
    except ValueError:
        raise HTTPException(400, f"Unknown construction: {req.construction}")
    try:
        return svc().create(req.net_id, construction, req.size, req.values)
    except KeyError as e:
        raise HTTPException(404, f"Net not found: {e}")
    except NetError as e:
        raise HTTPException(422, str(e))
    except ValueError as e:
        raise HTTPException(409, str(e))


@router.get("/nets")
def list_nets():
    """List all nets in memory."""
    return svc().list_nets()


@router.get("/nets/{net_id}")
def get_net(net_id: str):
    """Summary of a single net."""
    try:
        return svc().summary(net_id)
    except KeyError:
        raise HTTPException(404, f"Net not found: {net_id}")


@router.delete("/nets/{net_id}")
def close_net(net_id: str):
    svc().close_net(net_id)
    return {"net_id": net_id, "closed": True}


@router.post("/nets/{net_id}/extend")
def extend_net(net_id: str, req: ExtendRequest):
    """Store the net extended by one coordinate under a new id."""
    try:
        return svc().extend(net_id, req.new_id, req.value)
    except KeyError:
        raise HTTPException(404, f"Net not found: {net_id}")
    except NetError as e:
        raise HTTPException(422, str(e))
    except ValueError as e:
        raise HTTPException(409, str(e))


@router.post("/nets/{net_id}/extend-random")
def extend_net_random(net_id: str, req: RandomExtendRequest):
    """Extend the net with a generating value sampled at random."""
    try:
        return svc().extend_random(net_id, req.new_id)
    except KeyError:
        raise HTTPException(404, f"Net not found: {net_id}")
    except NetError as e:
        raise HTTPException(422, str(e))
    except ValueError as e:
        raise HTTPException(409, str(e))


@router.post("/nets/{net_id}/validate")
def validate_value(net_id: str, req: ValidateRequest):
    """Check a candidate value for the next coordinate."""
    try:
        return svc().validate_value(net_id, req.value)
    except KeyError:
        raise HTTPException(404, f"Net not found: {net_id}")
    except NetError as e:
        raise HTTPException(422, str(e))


@router.get("/nets/{net_id}/matrices/{coord}")
def get_matrix(net_id: str, coord: int):
    """Generating matrix of one coordinate."""
    try:
        return svc().get_matrix(net_id, coord)
    except (KeyError, IndexError):
        raise HTTPException(404, "Net or coordinate not found")


@router.get("/nets/{net_id}/text", response_class=PlainTextResponse)
def format_net(net_id: str, style: str = "terminal", interlacing_factor: int = 1):
    """Text rendering of the net."""
    output_style = _style(style)
    try:
        return svc().format(net_id, output_style, interlacing_factor)
    except KeyError:
        raise HTTPException(404, f"Net not found: {net_id}")
    except (NetError, ValueError) as e:
        raise HTTPException(422, str(e))


@router.post("/nets/{net_id}/save")
def save_net(net_id: str, req: SaveRequest):
    """Write the net's text rendering to disk."""
    output_style = _style(req.style)
    try:
        return svc().save(net_id, req.file_path, output_style, req.interlacing_factor)
    except KeyError:
        raise HTTPException(404, f"Net not found: {net_id}")
    except Exception as e:
        raise HTTPException(500, str(e))


@router.post("/nets/load")
def load_net(req: LoadRequest):
    """Load a net file as an explicit net."""
    try:
        return svc().load(req.net_id, req.file_path, req.num_rows)
    except FileNotFoundError:
        raise HTTPException(404, f"File not found: {req.file_path}")
    except NetError as e:
        raise HTTPException(422, str(e))
    except ValueError as e:
        raise HTTPException(409, str(e))
