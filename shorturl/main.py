from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.responses import PlainTextResponse
import uvicorn

from shorturl.core.config import API_PREFIX, HOST, PORT, settings
from shorturl.core.logging_config import configure_logging
from shorturl.api import management, shortener

logger = configure_logging()
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")

ADD_URL_PATH = f"{API_PREFIX}/addURL"


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="In-memory URL Shortener Service"
)

# Management routes must be registered before the root catch-all redirect.
app.include_router(management.router, prefix=API_PREFIX)
app.include_router(shortener.router, prefix="")

@app.exception_handler(RequestValidationError)
async def add_url_payload_handler(request: Request, exc: RequestValidationError):
    # Only the create endpoint answers a bad payload with a plain 400
    if request.url.path != ADD_URL_PATH:
        return await request_validation_exception_handler(request, exc)
    logger.warning(f"Rejected malformed payload on {ADD_URL_PATH}: {exc.errors()}")
    return PlainTextResponse("Invalid request payload", status_code=400)

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return PlainTextResponse("Internal server error", status_code=500)

def run():
    logger.info(f"Listening on {HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)

if __name__ == "__main__":
    run()
