from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint: links to the resources this API serves."""
    return {
        "meta": {
            "title": "Kontent Dashboard API",
            "description": "Browse Kontent.ai content and manage content assignments.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "items": "/items",
            "bulk-assign": "/assignments/bulk",
            "language": "/languages/resolved",
            "users": "/users",
            "analytics": "/analytics",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
