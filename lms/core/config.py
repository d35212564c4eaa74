# /lms/core/config.py

"""
Central configuration for the LMS backend.

Values are read once from the environment (a local `.env` file is honoured
through python-dotenv) and exposed as module-level constants. Every other
module imports the constant it needs instead of calling `os.getenv` itself.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./lms.db")

# --- Bearer token verification ---
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-key-change-this-in-prod")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

# --- Password hashing ---
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- CORS ---
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
