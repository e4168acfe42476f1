"""CORS middleware configuration"""
from fastapi.middleware.cors import CORSMiddleware
from formrelay.config import get_settings

settings = get_settings()


def setup_cors(app):
    """
    Allow the application form to post from its own origin

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
