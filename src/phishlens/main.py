from argparse import ArgumentParser

import uvicorn

from .app_factory import create_app
from .config import config

# Create app instance for uvicorn and local development
app = create_app()


def serve(argv=None):
    parser = ArgumentParser(description="Run the PhishLens API")
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.API_PORT)
    args = parser.parse_args(argv)

    uvicorn.run(app, host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    serve()
# uvicorn phishlens.main:app --port 8888
