"""
Local development server for the datapack Cloud Function.

This file is ONLY for local testing and should NOT be deployed.
"""

import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent.parent.parent.absolute()
sys.path.insert(0, str(project_root))

from flask import Flask, request

# Import the Cloud Function handler
from src.functions.datapack_builder.functions.main import datapack_handler

app = Flask(__name__)


@app.route('/', methods=['GET', 'POST', 'OPTIONS'])
def local_handler():
    """Local development handler that wraps the Cloud Function."""
    return datapack_handler(request)


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    print(f"Starting local server on http://localhost:{port}")
    print(
        f"Test with: curl -X POST http://localhost:{port} -H 'Content-Type: application/json' "
        "-d '{\"packName\": \"Speed Amulet\"}' -o pack.zip"
    )
    print("")
    app.run(host='0.0.0.0', port=port, debug=True)
