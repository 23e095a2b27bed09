import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import account_router, operations_router, statement_router
from .core.config import get_settings

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("ledger.startup", extra={"port": settings.port})
    yield
    logger.info("ledger.shutdown")

app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.include_router(account_router)
app.include_router(statement_router)
app.include_router(operations_router)
register_exception_handlers(app)

@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}


def run() -> None:
    uvicorn.run(
        "customer_ledger.app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
