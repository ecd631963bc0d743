"""
Cloud Function HTTP entry point for datapack generation.

Accepts POST requests with a pack configuration and returns the generated
datapack as a zip attachment. GET returns the effect catalog so clients can
populate their effect selector.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import flask
import functions_framework

from src.shared.utils.env import load_env
from src.shared.utils.logging import setup_logging

# Load environment and setup logging
load_env()
setup_logging()

logger = logging.getLogger(__name__)

from src.functions.datapack_builder.core.config import AssemblerSettings
from src.functions.datapack_builder.core.contracts import AssemblyError, ValidationError
from src.functions.datapack_builder.core.effects import DEFAULT_EFFECT, list_effects
from src.functions.datapack_builder.core.generation import PackAssembler, command_preview
from src.functions.datapack_builder.core.processing import normalize_pack_config


@functions_framework.http
def datapack_handler(request: flask.Request) -> flask.Response:
    """
    HTTP Cloud Function entry point for datapack generation.

    Handles:
    - OPTIONS: CORS preflight requests
    - GET: Effect catalog
    - POST: Datapack generation

    Args:
        request: Flask request object

    Returns:
        Flask Response with a zip attachment or JSON data
    """
    if request.method == 'OPTIONS':
        return _cors_response({}, status=204)

    if request.method == 'GET':
        return _cors_response({
            'default_effect': DEFAULT_EFFECT.id,
            'effects': [option.to_dict() for option in list_effects()],
        })

    if request.method != 'POST':
        logger.warning("Method not allowed: %s", request.method)
        return _error_response('Method not allowed. Use POST to build a datapack.', status=405)

    try:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            logger.warning("Rejected request without a JSON object body")
            return _error_response('Request body must be a JSON object', status=400)

        try:
            config = normalize_pack_config(payload)
        except ValidationError as e:
            logger.warning("Validation failed for field %s: %s", e.field, e)
            return _cors_response({'error': str(e), 'field': e.field}, status=422)

        logger.info("Building datapack %s (%s)", config.namespace, command_preview(config))

        try:
            archive = PackAssembler(AssemblerSettings.from_env()).assemble(config)
        except AssemblyError:
            logger.exception("Assembly invariant violated for namespace %r", config.namespace)
            return _error_response('Failed to assemble datapack', status=500)

        return _zip_response(archive, config.archive_name)

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return _error_response('An unexpected error occurred processing your request', status=500)


def _zip_response(archive: bytes, filename: str) -> flask.Response:
    """Create a CORS-enabled zip attachment response."""
    response = flask.make_response(archive, 200)
    response.headers["Content-Type"] = "application/zip"
    response.headers["Content-Disposition"] = f'attachment; filename="{filename}"'
    response.headers["Cache-Control"] = "no-store"
    _apply_cors(response)
    return response


def _cors_response(body: dict[str, Any], status: int = 200) -> flask.Response:
    """Create a CORS-enabled JSON response."""
    response = flask.make_response(json.dumps(body, ensure_ascii=False), status)
    response.headers["Content-Type"] = "application/json"
    _apply_cors(response)
    return response


def _apply_cors(response: flask.Response) -> None:
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Expose-Headers"] = "Content-Disposition"


def _error_response(message: str, status: int) -> flask.Response:
    """Create an error response."""
    return _cors_response({"error": message}, status=status)
