"""Internal constants shared across the package."""

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_DATA_SIZE = 1_000_000
DEFAULT_VALUE_TEMPLATE = "Элемент №{id}"

#: Page size used when ``limit`` is omitted and for the initial-state page.
DEFAULT_PAGE_SIZE = 20

#: Idle time before a search query is sent (seconds).
SEARCH_DEBOUNCE_S = 0.5

API_PREFIX = "/api"
ITEMS_PATH = f"{API_PREFIX}/items"
SORT_PATH = f"{API_PREFIX}/sort"
SELECT_PATH = f"{API_PREFIX}/select"
INITIAL_STATE_PATH = f"{API_PREFIX}/initial-state"

# Plain-text bodies returned by the write endpoints.
INVALID_DATA_TEXT = "Invalid data."
SORT_SAVED_TEXT = "Sort order saved."
SELECTION_SAVED_TEXT = "Selection saved."
