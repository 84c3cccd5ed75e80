from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv

from hackmate.backend import constants


_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_env_loaded = False


def load_environment(env_file: str | None = None) -> None:
	"""Load the .env file once; variables already set in the process win."""
	global _env_loaded
	if _env_loaded:
		return
	env_name = os.getenv("HACKMATE_ENV", "dev").strip() or "dev"
	path = env_file or ".env"
	if env_file is None and env_name != "dev" and Path(f".env.{env_name}").exists():
		path = f".env.{env_name}"
	load_dotenv(path)
	_env_loaded = True


def _float_env(name: str, default: float) -> float:
	raw = os.getenv(name, "").strip()
	if not raw:
		return default
	try:
		value = float(raw)
	except ValueError:
		return default
	return value if value > 0 else default


def gateway_api_key() -> str:
	return os.getenv("OPENROUTER_API_KEY", "").strip()


def gateway_base_url() -> str:
	return os.getenv("HACKMATE_GATEWAY_BASE_URL", "").strip() or constants.GATEWAY_BASE_URL


def gateway_timeout() -> float:
	return _float_env("HACKMATE_GATEWAY_TIMEOUT_S", constants.GATEWAY_TIMEOUT_S)


def app_url() -> str:
	return os.getenv("HACKMATE_APP_URL", "").strip() or constants.APP_URL


def model_roster() -> List[str]:
	raw = os.getenv("HACKMATE_MODEL_ROSTER", "").strip()
	models = [item.strip() for item in raw.split(",") if item.strip()]
	if not models:
		models = list(constants.MODEL_ROSTER)
	seen: set[str] = set()
	unique: List[str] = []
	for model in models:
		if model in seen:
			continue
		seen.add(model)
		unique.append(model)
	return unique


def log_level() -> str:
	return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def log_format() -> str:
	return os.getenv("LOG_FORMAT", "").strip() or _DEFAULT_LOG_FORMAT


def environment_report() -> Dict[str, object]:
	missing: List[str] = []
	present: List[str] = []
	for name in constants.REQUIRED_ENV_VARS:
		if os.getenv(name, "").strip():
			present.append(name)
		else:
			missing.append(name)
	if missing:
		summary = f"Missing {len(missing)} environment variables: {', '.join(missing)}"
	else:
		summary = "All environment variables are configured"
	return {
		"is_valid": not missing,
		"missing": missing,
		"present": present,
		"summary": summary,
	}


def server_host() -> str:
	return os.getenv("HACKMATE_HOST", "").strip() or "0.0.0.0"


def server_port() -> int:
	raw = os.getenv("HACKMATE_PORT", "").strip()
	try:
		value = int(raw) if raw else 8000
	except ValueError:
		return 8000
	return value if value > 0 else 8000
