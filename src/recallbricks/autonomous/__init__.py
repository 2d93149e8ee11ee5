"""Autonomous agent feature clients.

Each client shares the executor of the :class:`~recallbricks.RecallBricks`
instance that created it, so auth, timeouts and retries behave the same as
for the core memory endpoints.
"""

from .base import AutonomousClient
from .context import ContextClient
from .goals import GoalsClient
from .health import HealthClient
from .memory_types import MemoryTypesClient
from .metacognition import MetacognitionClient
from .models import *  # noqa: F401,F403
from .models import __all__ as _model_names
from .prospective_memory import ProspectiveMemoryClient
from .search import HybridSearchClient
from .uncertainty import UncertaintyClient
from .working_memory import WorkingMemoryClient

__all__ = [
    "AutonomousClient",
    "ContextClient",
    "GoalsClient",
    "HealthClient",
    "HybridSearchClient",
    "MemoryTypesClient",
    "MetacognitionClient",
    "ProspectiveMemoryClient",
    "UncertaintyClient",
    "WorkingMemoryClient",
    *_model_names,
]
