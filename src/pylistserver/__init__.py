"""pylistserver - In-memory sortable, searchable list API built on aiohttp."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pylistserver")
except PackageNotFoundError:
    __version__ = "0+local"
from pylistserver.client import ListClient
from pylistserver.config import ListServerConfig
from pylistserver.exceptions import (
    InvalidOrderError,
    InvalidSelectionError,
    ListConfigError,
    ListServerError,
    ListTransportError,
    ListValidationError,
)
from pylistserver.interaction import Debouncer, move_item, toggle_selection
from pylistserver.models import InitialState, Item, ItemsPage
from pylistserver.server import create_app
from pylistserver.state.policy import HasMorePolicy
from pylistserver.state.store import ListStore

__all__ = [
    "__version__",
    "Debouncer",
    "HasMorePolicy",
    "InitialState",
    "InvalidOrderError",
    "InvalidSelectionError",
    "Item",
    "ItemsPage",
    "ListClient",
    "ListConfigError",
    "ListServerConfig",
    "ListServerError",
    "ListStore",
    "ListTransportError",
    "ListValidationError",
    "create_app",
    "move_item",
    "toggle_selection",
]
