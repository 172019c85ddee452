"""Application settings read from the environment.

Protean infrastructure (databases, brokers, event store) is configured in
``domain.toml``; everything the application code needs at runtime lives here.
A ``.env`` file in the working directory is loaded when present.
"""

import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()

JWT_SECRET = os.getenv("JWT_SECRET", "dev-access-secret")
JWT_EMAIL_SECRET = os.getenv("JWT_EMAIL_SECRET", "dev-email-secret")
JWT_ALGORITHM = "HS256"

ACCESS_TOKEN_TTL = timedelta(hours=1)
VERIFICATION_TOKEN_TTL = timedelta(days=1)

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")

# "fake" records messages in memory, "resend" delivers through the Resend API
EMAIL_BACKEND = os.getenv("EMAIL_BACKEND", "fake")
RESEND_API_KEY = os.getenv("RESEND_API_KEY", "")
EMAIL_FROM = os.getenv("EMAIL_FROM", "Marketplace <no-reply@marketplace.local>")
