"""Allow ``python -m pdf_reader`` to start the server."""

import sys

from .server.mcp_server import main

sys.exit(main())
