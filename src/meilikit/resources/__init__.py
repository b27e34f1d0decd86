"""Resource clients, one per API area.

Each resource shares the client's transport and codec and exposes async
methods mapping one-to-one onto server endpoints.
"""

from .base_resource import BaseResource
from .documents import Documents
from .indexes import Indexes
from .tasks import Tasks

__all__ = ["BaseResource", "Documents", "Indexes", "Tasks"]
