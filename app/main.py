import uvicorn
from dotenv import load_dotenv

from infrastructure.services import get_settings
from server import server

load_dotenv()

app = server.handler


def run():
    """Serve the tool API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.server.HOST,
        port=settings.server.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
