import logging

import uvicorn

from mealbudget.api.api_run import app
from mealbudget.utilities.config import APP_HOST, APP_PORT, DEBUG, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
