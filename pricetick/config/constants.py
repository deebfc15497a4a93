"""
Global constants for the PriceTick app.
Keep ONLY pure constants here (no heavy imports / logic).
"""

# --- App meta / behavior ---
APP_TITLE = "PriceTick"
USER_AGENT = "PriceTick/1.0 (+local)"
TIMEOUT = 10  # seconds
SETTINGS_FILE = "pricetick_settings.json"
LOG_LEVEL = "INFO"

# --- Ticker defaults ---
INITIAL_PRICE = "159.95"
INCREMENT = "0.5"                # random-walk half width ("Update price" button)

# --- Animation (rendering only) ---
HIGHLIGHT_MS = 350               # highlight color kept this long, then neutral
MIN_HIGHLIGHT_MS = 50

# --- Live feed ---
FEED_URL = "https://api.coinbase.com/v2/prices/BTC-USD/spot"
FEED_AMOUNT_PATH = "data.amount"
FEED_INTERVAL_MS = 5_000
MIN_FEED_INTERVAL_MS = 1_000

# --- Window config ---
WIN_W, WIN_H = 420, 220
WIN_POS = (100, 100)

# --- Fonts ---
PREFERRED_FONTS = ["SF Pro Display", "Segoe UI Variable", "Segoe UI", "Helvetica", "Arial"]
