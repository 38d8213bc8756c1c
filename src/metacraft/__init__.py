"""metacraft — SEO / Open Graph / JSON-LD composer with live OG image preview."""

__all__ = [
    "__version__",
    "MetaConfig",
    "FormState",
    "UrlSynchronizer",
    "derive",
    "contrast_ratio",
    "expand_hex",
    "validate",
]
__version__ = "0.1.0"

from metacraft.color import contrast_ratio, expand_hex  # noqa: E402, F401
from metacraft.derive import derive  # noqa: E402, F401
from metacraft.form import FormState  # noqa: E402, F401
from metacraft.model import MetaConfig  # noqa: E402, F401
from metacraft.urlstate import UrlSynchronizer  # noqa: E402, F401
from metacraft.validation import validate  # noqa: E402, F401
