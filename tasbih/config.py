"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: Environment variables TASBIH_DATA_DIR, TASBIH_LOG_LEVEL, TASBIH_PAGE_URL (read by helpers below).
- Outputs: Constants (phrases, storage key, file names, share text, effect timings).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

import logging
import os

# Fixed phrases in display order; keyboard shortcuts "1".."4" follow this order
PHRASES = (
    "سبحان الله وبحمده",
    "الحمد لله",
    "الله أكبر",
    "اللهم ارفع درجته",
)

# Key of the persisted record inside the storage file
STORAGE_KEY = "hazem-memorial-tasbih"

# Persistence: filename for the key-value storage file (path resolved in storage module)
STORAGE_FILENAME = "tasbih_storage.json"

APP_TITLE = "Tasbih Counter"
APP_DIR_NAME = "Tasbih Counter"

# maximum number of log lines kept in the Logs panel (oldest trimmed)
LOG_MAX_LINES = 1000
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

## User-facing messages
RESET_TITLE = "إعادة التعيين"
RESET_PROMPT = "هل أنت متأكد من إعادة تعيين جميع العدادات؟"
RESET_DONE_MESSAGE = "تم إعادة تعيين العدادات بنجاح"
COPY_DONE_MESSAGE = "تم نسخ الرابط بنجاح"

## Sharing
SHARE_TEXT = "صدقة جارية على روح المرحوم حازم محمد عقل - اللهم اجعلها نورًا ورحمةً ورفعةً لدرجته"
WHATSAPP_URL_PREFIX = "https://wa.me/?text="
FACEBOOK_URL_PREFIX = "https://www.facebook.com/sharer/sharer.php?u="
DEFAULT_PAGE_URL = "https://hazem-memorial.github.io/tasbih/"

## Feedback effects
PULSE_MS = 150       # button stays pressed-looking this long after a tap
MESSAGE_MS = 2000    # transient overlay message lifetime
RESET_COLOR = "#28a745"
COPY_COLOR = "#007bff"


def get_log_level() -> str:
    level = os.environ.get("TASBIH_LOG_LEVEL", "INFO").upper()
    # getLevelName maps known names to their int value and echoes unknown ones
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def get_page_url() -> str:
    return os.environ.get("TASBIH_PAGE_URL") or DEFAULT_PAGE_URL
