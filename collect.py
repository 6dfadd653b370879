import logging
import os
import requests
from typing import List, Optional

from config import AppConfig

logger = logging.getLogger(__name__)

AVATAR_FILE = "avatar.png"


class FetchError(RuntimeError):
    """Raised when the Codeforces API cannot provide a required resource."""


class UserNotFoundError(FetchError):
    pass


def _get_json(url: str, params: dict) -> dict:
    response = requests.get(url, params=params)
    logger.debug("GET %s %s -> %s", url, params, response.status_code)
    return response.json()


def fetch_user_info(handle: str, cfg: AppConfig) -> dict:
    data = _get_json(f"{cfg.api_base}/user.info", {"handles": handle})
    if data.get("status") != "OK" or not data.get("result"):
        logger.info("API Error for %s: %s", handle, data.get("comment"))
        raise UserNotFoundError("User not found")
    return data["result"][0]


def fetch_rating_history(handle: str, cfg: AppConfig) -> List[dict]:
    data = _get_json(f"{cfg.api_base}/user.rating", {"handle": handle})
    if data.get("status") != "OK":
        logger.info("No rating history for %s: %s", handle, data.get("comment"))
        return []
    print(f"Found {len(data['result'])} rating change stats for {handle}")
    return data["result"]


def fetch_submissions(handle: str, cfg: AppConfig) -> List[dict]:
    params = {"handle": handle, "from": 1, "count": cfg.submission_count}
    data = _get_json(f"{cfg.api_base}/user.status", params)
    if data.get("status") != "OK":
        logger.info("No submissions for %s: %s", handle, data.get("comment"))
        return []
    print(f"Found {len(data['result'])} submissions for {handle}")
    return data["result"]


def download_avatar(url: Optional[str], directory: str) -> Optional[str]:
    """Save the profile picture as avatar.png; failures are logged and ignored."""
    if not url:
        return None
    if url.startswith("//"):
        url = "https:" + url
    try:
        response = requests.get(url)
        response.raise_for_status()
        path = os.path.join(directory, AVATAR_FILE)
        with open(path, "wb") as f:
            f.write(response.content)
    except (requests.RequestException, OSError) as e:
        logger.warning("Avatar download error: %s", e)
        return None
    print(f"Avatar saved as {AVATAR_FILE}")
    return path
