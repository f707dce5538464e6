from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.settings import EngineSettings
from .logging_config import setup_logging
from .punches.repository import PunchRepository, RosterRepository
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(
    *,
    punches_repo: Optional[PunchRepository] = None,
    roster_repo: Optional[RosterRepository] = None,
) -> Flask:
    """Flask host around the engine.

    The punch store and the roster are external; pass their repositories in.
    Without them the app serves empty in-memory snapshots.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    engine_settings = EngineSettings.from_module(settings)
    logger.info(
        "settings=%s timezone=%s pairing=%s",
        settings_module,
        engine_settings.timezone,
        engine_settings.pairing_policy.value,
    )

    container = build_container(settings=engine_settings, punches_repo=punches_repo, roster_repo=roster_repo)
    app.extensions["time_bank_container"] = container

    register_reports(app, container)

    return app
