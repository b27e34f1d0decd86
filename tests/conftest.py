from typing import Any, Callable

import pytest

from factories import HOST, patch_client_with_responder
from meilikit import MeilisearchClient


@pytest.fixture
def make_client() -> Callable[[Any], MeilisearchClient]:
    """Factory returning a client whose requests are answered by ``responder``."""

    def factory(responder: Any) -> MeilisearchClient:
        client = MeilisearchClient(HOST, api_key="masterKey")
        patch_client_with_responder(client, responder)
        return client

    return factory
