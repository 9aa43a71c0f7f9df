"""
Central configuration for the sayings dataset generator.

BACKENDS: ordered list of model backends. The first entry is the primary one;
the others are fallbacks tried in order when a call fails. Each entry is a
dict with:
    "provider"  – "mistral" | "openai" | "gemini"
    "model"     – model identifier for that provider

Layout on disk:
    datasets/<anything>/<name>.txt         – input, one saying per file
    datasets/<anything>/<name>.json        – generated record
    datasets/<anything>/<name>-error.json  – failure kept for manual review
"""

# ── Model backends ─────────────────────────────────────────────────────────────
BACKENDS: list[dict[str, str]] = [
    {"provider": "mistral", "model": "mistral-large-latest"},
    {"provider": "gemini",  "model": "gemini-2.0-flash"},
]
TEMPERATURE = 0                # 0 = most literal, repeatable splits

MISTRAL_BASE_URL = "https://api.mistral.ai/v1"

# Transport-level attempts per backend (rate limits, timeouts, 5xx).
# This does NOT add validation retries; those are fixed at one corrective pass.
TRANSPORT_ATTEMPTS = 3

# ── Processing ─────────────────────────────────────────────────────────────────
# How many sayings to send in a single API call.
BATCH_SIZE = 10

# ── Paths ──────────────────────────────────────────────────────────────────────
DATASETS_DIR = "datasets"
INPUT_SUFFIX = ".txt"
OUTPUT_SUFFIX = ".json"
ERROR_SUFFIX = "-error.json"
