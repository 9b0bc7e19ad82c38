# processdesk/dependencies.py

from fastapi import Request

from processdesk.config import Settings
from processdesk.storage.base import Storage


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
