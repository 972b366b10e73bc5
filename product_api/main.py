"""ASGI entry point: `uvicorn product_api.main:app`."""

from product_api.api import create_app
from product_api.config import configure_logging, get_config

config = get_config()
configure_logging(config.logging)

app = create_app(config)
