APP_NAME = "HackMate AI"
APP_VERSION = "1.0.0"
APP_URL = "https://hackmate.vercel.app"
DEFAULT_CORS_ALLOW_ORIGINS = [
	"http://localhost",
	"http://127.0.0.1",
	"http://localhost:3000",
]
DEFAULT_TRUSTED_HOSTS = [
	"127.0.0.1",
	"localhost",
	"testserver",
]

GATEWAY_BASE_URL = "https://openrouter.ai/api/v1"
GATEWAY_TIMEOUT_S = 30.0

# Cheaper, more available models first; gemini rate-limits the most so it goes last.
MODEL_ROSTER = (
	"meta-llama/llama-3.2-3b-instruct:free",
	"mistralai/mistral-7b-instruct:free",
	"huggingfaceh4/zephyr-7b-beta:free",
	"google/gemini-2.0-flash-exp:free",
)

PROMPT_MAX_CHARS = 2000
RATE_LIMIT_COOLDOWN_S = 2.0
RATE_LIMIT_RETRY_AFTER_S = 30
CACHE_TTL_SECONDS = 5 * 60

TASK_COUNT_MIN = 6
TASK_COUNT_MAX = 8
TASK_EFFORTS = ("Low", "Medium", "High")
DEFAULT_TASK_EFFORT = "Medium"
DEFAULT_TASK_TITLE = "Untitled Task"
DEFAULT_TASK_DESCRIPTION = "No description provided"

DEFAULT_DURATION = "24h"
DEFAULT_MENTOR_CONTEXT = "Hackathon project"
DEFAULT_FEATURES_TEXT = "Basic functionality"

REQUIRED_ENV_VARS = ("OPENROUTER_API_KEY",)
