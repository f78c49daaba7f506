"""Run the API server: ``python -m campaign_panel``."""

import uvicorn

from campaign_panel.core.config import settings


def main() -> None:
    uvicorn.run(
        "campaign_panel.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
