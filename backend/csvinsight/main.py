import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from csvinsight.api.routes import charts, uploads
from csvinsight.core.config import settings

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        logger.info("Incoming request: %s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
            logger.info("Response: %s %s -> %d", request.method, request.url.path, response.status_code)
            return response
        except Exception as e:
            logger.exception("Request failed: %s %s -> %s", request.method, request.url.path, e)
            raise


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    app = FastAPI(title=settings.APP_NAME, version="0.1.0", debug=settings.DEBUG)
    
    # Request logging before CORS so every request is seen
    app.add_middleware(LoggingMiddleware)
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    app.include_router(uploads.router, prefix="/api/csvs", tags=["uploads"])
    app.include_router(charts.router, prefix="/api/charts", tags=["charts"])
    
    @app.get("/api/health")
    def health():
        return {"status": "healthy"}
    
    return app


app = create_app()
