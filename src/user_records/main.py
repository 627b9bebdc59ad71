from . import composition
from .config import settings
from .logging_config import get_logger
from .wiring import create_app

logger = get_logger(__name__)

app = create_app()


@app.on_event("startup")
async def on_startup():
    # keep the teardown helper so shutdown can close the store client
    app.state.wire_result = await composition.wire_app(app, settings)


@app.on_event("shutdown")
async def on_shutdown():
    wired = getattr(app.state, "wire_result", None)
    if wired is not None:
        await wired.teardown()
    logger.info("shutdown complete")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("user_records.main:app", host=settings.server_host, port=settings.server_port)
