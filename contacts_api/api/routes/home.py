"""Home Route - HTML greeting at the service root."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["home"])


@router.get("/", response_class=HTMLResponse)
async def home():
    return "<h1>Welcome to contacts api</h1>"
