# Load .env vars from file before everything else
from dotenv import load_dotenv

load_dotenv()

from .logger import setup_logging  # noqa: E402

setup_logging()

from .core.firebase_json import (  # noqa: E402
    FirebaseJsonUpdate,
    ensure_configured,
    generate_flutter_map,
)
from .core.utils.table import list_as_padded_table  # noqa: E402

__all__ = [
    "FirebaseJsonUpdate",
    "ensure_configured",
    "generate_flutter_map",
    "list_as_padded_table",
]
