import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./barbershop.db")

# Firebase Configuration (default identity provider)
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")

# Frontend base URL for redirects
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")

# Sign-in page of the identity provider; /api/login redirects here
AUTH_LOGIN_URL = os.getenv("AUTH_LOGIN_URL", f"{FRONTEND_URL}/login")

# Cookie carrying the provider's ID token for browser sessions
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "session")

ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5173,http://localhost:3000",
).split(",")

SECURITY_HEADERS_ENABLED = os.getenv("SECURITY_HEADERS_ENABLED", "true").lower() == "true"

# First-run demo catalog (three services, two barbers)
SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "true").lower() == "true"
