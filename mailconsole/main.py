from prometheus_fastapi_instrumentator import Instrumentator

from mailconsole import create_app
from mailconsole.core.config import get_settings
from mailconsole.core.logging import setup_logging

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
app = create_app(settings)
Instrumentator().instrument(app).expose(app)


@app.get("/health")
async def health() -> dict[str, bool]:
    return {"ok": True}


def run() -> None:
    import uvicorn

    uvicorn.run("mailconsole.main:app", host=settings.HOST, port=settings.PORT)
