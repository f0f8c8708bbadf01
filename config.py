"""
Configuration constants for the checklist generation pipeline.
All hyperparameters and model settings are centralized here.
"""

import os

from dotenv import load_dotenv

# Load .env from the working directory (before any os.getenv calls)
load_dotenv()

# ============================================================================
# MODEL CONFIGURATION
# ============================================================================

# LLM Model
MODEL_NAME = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

# Credential; absence is detected before any request is attempted
API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")

# Client-side request handling (retries live in the client, never in the pipeline)
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "120"))
LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "2"))

# ============================================================================
# GENERATION CONFIGURATION
# ============================================================================

# Low temperature for literal entity extraction
EXTRACTION_TEMPERATURE = 0.1

# Moderate temperature for generative field prose
FIELD_TEMPERATURE = 0.2

JSON_MIME_TYPE = "application/json"

# ============================================================================
# TEXT PROCESSING CONFIGURATION
# ============================================================================

# Source prefix embedded in entity extraction prompts
MAX_ENTITY_SOURCE_CHARS = 50000

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
