import importlib
import logging

from dotenv import load_dotenv


def load_env() -> None:
    # Loads .env if present; safe no-op if missing
    load_dotenv()


def configure_logging() -> None:
    """
    Loads .env, re-reads settings, then configures root logging from LOG_LEVEL.

    settings holds env values captured at import; reloading it keeps .env
    values even when truckorder.api modules were imported first.
    """
    load_env()
    from truckorder.api import settings

    importlib.reload(settings)
    logging.basicConfig(level=settings.LOG_LEVEL)
