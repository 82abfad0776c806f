import logging

import uvicorn

from balancesheet.core.config import MANAGED_HOSTING, PORT

logger = logging.getLogger(__name__)


def main() -> None:
    if MANAGED_HOSTING:
        # En Vercel la plataforma atiende el socket e importa balancesheet.main:app
        logger.info("Running on managed hosting - not binding a port")
        return
    uvicorn.run("balancesheet.main:app", host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
