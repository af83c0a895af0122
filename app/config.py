from decouple import config, Csv

APP_NAME = config("APP_NAME", default="LegalConnect API")
APP_VERSION = "1.0.0"

LOG_LEVEL = config("LOG_LEVEL", default="INFO")

# Load the demo lawyers, news and law sections on startup
SEED_SAMPLE_DATA = config("SEED_SAMPLE_DATA", default=True, cast=bool)

CORS_ORIGINS = config(
    "CORS_ORIGINS",
    default="http://localhost:5000,http://localhost:5173",
    cast=Csv()
)

# Auth
SECRET_KEY = config("SECRET_KEY", default="legalconnect-dev-secret-change-me")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = config("ACCESS_TOKEN_EXPIRE_MINUTES", default=60, cast=int)

# Payments
STRIPE_SECRET_KEY = config("STRIPE_SECRET_KEY", default="")
STRIPE_CURRENCY = config("STRIPE_CURRENCY", default="inr")

# Chat assistant: "keyword" or "openai"
CHAT_BACKEND = config("CHAT_BACKEND", default="keyword")
OPENAI_API_KEY = config("OPENAI_API_KEY", default="")
OPENAI_MODEL = config("OPENAI_MODEL", default="gpt-4o-mini")
