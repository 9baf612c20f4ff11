"""Router – greeting."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from src.app.config import GREETING

router = APIRouter(tags=["Greeting"])


@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
def greeting() -> str:
    return GREETING
