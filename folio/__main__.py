import logging

import uvicorn

from folio.core import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(
        "folio.main:app",
        host=settings.host(),
        port=settings.port(),
        log_level=settings.log_level().lower(),
    )


if __name__ == "__main__":
    main()
