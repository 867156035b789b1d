from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from hypercorn.asyncio import serve
from hypercorn.config import Config
from pydantic import BaseModel, Field

from ..api import CATALOG_VERSION, call_tool, catalog, get_api_function
from ..domain import UnknownTool

logger = logging.getLogger(__name__)

app = FastAPI(title="macOS Calendar Local API", version=CATALOG_VERSION)


class ToolCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


@app.get("/api/tools")
def list_tools() -> Dict[str, Any]:
    return catalog()


@app.post("/api/tools/{name}")
def invoke_tool(name: str, request: ToolCallRequest) -> Dict[str, Any]:
    try:
        get_api_function(name)
    except UnknownTool as exc:
        logger.warning("Tool not found: %s", name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    response = call_tool(name, request.arguments)
    logger.debug("Tool %s finished (error=%s)", name, response.is_error)
    return {"name": name, "text": response.text, "is_error": response.is_error}


async def _serve(config: Config) -> None:
    await serve(app, config)


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    config = Config()
    config.bind = [f"{host}:{port}"]
    asyncio.run(_serve(config))
