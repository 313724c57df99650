"""Command line entry for the Employee Registry HTTP server."""
import logging
import uvicorn
from employee_registry.config.settings import ENV, HOST, PORT, configure_logging
from employee_registry.main import create_app

logger = logging.getLogger(__name__)


def run_server(host: str = HOST, port: int = PORT) -> None:
    configure_logging()
    app = create_app()
    logger.info(f"[API] Server running on http://{host}:{port} (env={ENV})")
    uvicorn.run(app, host=host, port=port)


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
