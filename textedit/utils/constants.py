APP_ORG = "QuickTools"
APP_NAME = "TextEdit"

DEFAULT_ENCODING = "utf-8"
TEXT_FILE_FILTER = "Text files (*.txt *.text *.log *.md);;All files (*)"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_RECENTS = "file/recent"
MAX_RECENTS = 8
STATUS_TIMEOUT_MS = 3000
