"""Main FastAPI application"""
from fastapi import Depends, FastAPI
from formrelay.config import Settings, get_settings
from formrelay.middleware.cors import setup_cors
from formrelay.middleware.error_handler import ErrorHandlerMiddleware
from formrelay.routers import submit
import logging

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

missing = settings.missing_settings()
if missing:
    logger.warning(f"Missing settings, submissions will be rejected: {', '.join(missing)}")

app = FastAPI(
    title="Form Relay API",
    description="Relays job application forms to Telegram after a Turnstile check",
    version="1.0.0",
    docs_url="/docs" if settings.environment == "development" else None,
    redoc_url=None
)

# Setup CORS
setup_cors(app)

# Add error handling middleware
app.add_middleware(ErrorHandlerMiddleware)


# Health check endpoint
@app.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "form-relay",
        "configured": not settings.missing_settings()
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Form Relay API",
        "version": "1.0.0"
    }


app.include_router(submit.router, tags=["Submissions"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
