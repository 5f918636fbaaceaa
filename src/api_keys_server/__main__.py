"""``python -m api_keys_server`` runs the CLI, defaulting to ``serve``."""

import sys

from api_keys_server.cli import main

main(sys.argv[1:] or ["serve"], prog_name="api-keys-server")
