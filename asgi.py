"""ASGI entry point.

    uvicorn asgi:app

``handler`` wraps the same app for serverless function hosts.
"""

from mangum import Mangum

from api.app import create_app
from config import load_config
from logger import setup_logging
from services.base import Services

config = load_config()
setup_logging(config)

app = create_app(Services(config))
handler = Mangum(app)
