"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("RRC_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("RRC_LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("RRC_LOG_TO_FILE", "").lower() in ("1", "true", "yes")

# OpenAlex API
API_BASE_URL = os.getenv("OPENALEX_BASE_URL", "https://api.openalex.org")
API_TIMEOUT = int(os.getenv("OPENALEX_TIMEOUT", "30"))
API_EMAIL = os.getenv("OPENALEX_EMAIL") or None

# Lookups per query (topic+country, country)
MAX_CONCURRENT = 2

# Rates above this percentage are shown as a ceiling effect
CEILING_PCT = 90

# (topic, country, expected risk)
EXAMPLE_QUERIES = [
    ("malaria prevention", "Nigeria", "high"),
    ("climate change adaptation", "Senegal", "high"),
    ("biometric voter registration", "Ghana", "severe"),
    ("machine learning", "United States", "low"),
    ("maternal health", "Rwanda", "high"),
    ("quantum computing", "Germany", "moderate"),
]
