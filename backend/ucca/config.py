import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

UCCA_LOG_LEVEL = os.getenv("UCCA_LOG_LEVEL", "INFO").upper()

# Upper bound on UCCAs returned per team by the API; 0 disables the cap
UCCA_MAX_RESULTS = int(os.getenv("UCCA_MAX_RESULTS", "0"))

UCCA_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("UCCA_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
