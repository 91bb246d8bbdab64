import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from travel_whisperer.api.route import error_response, router as api_router
from travel_whisperer.utils.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI Travel Whisperer API", version="1.0.0")

app.include_router(api_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected request body on %s: %s", request.url.path, exc.errors())
    return error_response("Invalid request body", 400)


@app.get("/")
def read_root():
    return {"message": "Welcome to the AI Travel Whisperer API"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("travel_whisperer.api.main:app", host=settings.host, port=settings.port, reload=True)
