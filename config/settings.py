import os

# --- Upstream RadioFM API ---
RADIOFM_API_BASE = "https://devappradiofm.radiofm.co/rfm/api"
COMBO_SEARCH_PATH = "/new_combo_search.php"
SEARCH_PARAM = "srch"
UPSTREAM_TIMEOUT = 15.0  # seconds

# Public player page, the station short url is appended
LISTEN_URL_BASE = "https://appradiofm.com/radioplay/"

SERVICE_STATUS = "RadioFM ChatGPT Plugin server is running"
SERVICE_VERSION = "1.0.0"
DOCS_PATH = "/.well-known/openapi.yaml"

# --- Runtime (Load from Render Environment Variables) ---
HOST = os.environ.get('HOST')
PORT = os.environ.get('PORT')

if HOST is None or HOST == "":
    HOST = "0.0.0.0"

try:
    PORT = int(PORT)
except (TypeError, ValueError):
    PORT = 3000
