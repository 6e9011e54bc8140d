"""Registry bootstrap (import side-effect)."""
from .api import set_registry
from .bootstrap import build_registry

# populates the holiday registry
from .holidays import standard as _standard  # noqa: F401

set_registry(build_registry())
