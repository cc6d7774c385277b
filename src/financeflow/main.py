import uvicorn

from financeflow.app import app
from financeflow.core import settings
from financeflow.logger import get_logging_config


def run() -> None:
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT, log_config=get_logging_config())


if __name__ == "__main__":
    run()
