"""Deployment wrapper for the datapack builder Cloud Function."""

from __future__ import annotations

import sys
from pathlib import Path

import flask

project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.functions.datapack_builder.functions.main import datapack_handler as _datapack_handler


def datapack_handler(request: flask.Request) -> flask.Response:
    return _datapack_handler(request)
