from __future__ import annotations

from meilikit.models.base import MeiliModel, Timestamp


class Version(MeiliModel):
    """Build information reported by ``GET /version``."""

    commit_sha: str
    commit_date: Timestamp
    pkg_version: str
