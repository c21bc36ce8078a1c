"""
Back-office E2E Configuration

Every setting can be overridden from the environment so the same campaigns
run against a local shop or a CI deployment.
"""
import os
from pathlib import Path
from typing import Any, Dict


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class E2EConfig:
    """Back-office E2E test configuration."""

    # Shop settings
    SHOP_URL = os.environ.get("E2E_SHOP_URL", "http://localhost:8001").rstrip("/")
    ADMIN_PATH = os.environ.get("E2E_ADMIN_PATH", "admin-dev").strip("/")
    BO_URL = f"{SHOP_URL}/{ADMIN_PATH}/"
    SHOP_NAME = os.environ.get("E2E_SHOP_NAME", "PrestaShop")

    # Back-office employee
    EMAIL = os.environ.get("E2E_BO_EMAIL", "demo@prestashop.com")
    PASSWORD = os.environ.get("E2E_BO_PASSWD", "prestashop_demo")

    # Timeouts (milliseconds, except SHOP_WAIT in seconds)
    DEFAULT_TIMEOUT = int(os.environ.get("E2E_TIMEOUT", 30000))
    NAVIGATION_TIMEOUT = 60000
    SHOP_WAIT = int(os.environ.get("E2E_SHOP_WAIT", 30))

    # Browser settings
    HEADLESS = _env_bool("E2E_HEADLESS", True)
    SLOW_MO = int(os.environ.get("E2E_SLOW_MO", 0))

    # Screenshots and videos
    SCREENSHOT_ON_FAILURE = True
    RECORD_VIDEO = _env_bool("E2E_RECORD_VIDEO", False)
    ARTIFACTS_DIR = Path(os.environ.get("E2E_ARTIFACTS_DIR", "artifacts"))

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        return {
            "bo_url": cls.BO_URL,
            "shop_name": cls.SHOP_NAME,
            "headless": cls.HEADLESS,
            "slow_mo": cls.SLOW_MO,
            "default_timeout": cls.DEFAULT_TIMEOUT,
        }
