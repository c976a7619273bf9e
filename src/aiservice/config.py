import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "").upper()

# GitHub Models (OpenAI-compatible inference endpoint)
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
GITHUB_MODELS_ENDPOINT = os.getenv(
    "GITHUB_MODELS_ENDPOINT", "https://models.github.ai/inference"
)
GITHUB_MODEL_NAME = os.getenv("GITHUB_MODEL_NAME", "meta/Meta-Llama-3.1-8B-Instruct")

# Hugging Face inference router
HUGGINGFACE_TOKEN_ENV = "HUGGINGFACE_TOKEN"
HUGGINGFACE_ENDPOINT = os.getenv(
    "HUGGINGFACE_ENDPOINT", "https://router.huggingface.co/v1"
)
HUGGINGFACE_PROVIDER = os.getenv("HUGGINGFACE_PROVIDER", "fireworks-ai")
HUGGINGFACE_MODEL_NAME = os.getenv(
    "HUGGINGFACE_MODEL_NAME", "meta-llama/Llama-3.1-70B-Instruct"
)

REQUEST_TIMEOUT_S = float(os.getenv("LLM_TIMEOUT_S", "60"))

# === Sampling === shared by every completion call
TEMPERATURE = 0.2
TOP_P = 0.1
CHAT_MAX_TOKENS = 1000
EXTRACTION_MAX_TOKENS = 200
