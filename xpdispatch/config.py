"""Runtime settings read from the environment.

A ``.env`` file in the working directory is loaded first, so local
development can point the durable storage somewhere disposable::

    XPDISPATCH_STATE_DIR=/tmp/xpdispatch-dev
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

DEFAULT_STATE_DIR = Path("~/.xpdispatch")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    state_dir: Path = DEFAULT_STATE_DIR


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process from ``.env`` and the environment."""
    load_dotenv()
    state_dir = os.environ.get("XPDISPATCH_STATE_DIR")
    if state_dir:
        return Settings(state_dir=Path(state_dir).expanduser())
    return Settings(state_dir=DEFAULT_STATE_DIR.expanduser())
