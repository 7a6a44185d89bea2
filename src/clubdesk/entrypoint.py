"""Backend entrypoint; starts uvicorn with host and port from the environment."""
import os

import uvicorn

from clubdesk.main import app


def main() -> None:
    port = int(os.environ.get("CLUBDESK_PORT", "8001"))
    host = os.environ.get("CLUBDESK_HOST", "127.0.0.1")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
