import os
import logging
from typing import Optional

try:
	from dotenv import find_dotenv, load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	# Look for .env from the working directory, not from the installed package.
	load_dotenv(find_dotenv(usecwd=True))


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_optional_str_env(name: str) -> Optional[str]:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return None
	return raw.strip()


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return default


USER_AGENT = get_str_env("SITEWALK_USER_AGENT", "SiteWalk/0.1")
HTTP_TIMEOUT = get_float_env("SITEWALK_HTTP_TIMEOUT", 10.0)
LOG_LEVEL = get_str_env("SITEWALK_LOG_LEVEL", "WARNING").strip().upper()
SEED_URL = get_optional_str_env("SITEWALK_SEED_URL")
