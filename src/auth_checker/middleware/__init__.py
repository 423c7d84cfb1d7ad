"""Framework adapters for the auth checker (FastAPI: fastapi_middleware)."""
