"""
CLI script to launch the PDF Reader MCP server over stdio.

Usage:
    python scripts/run_server.py                        # PDF from PDF_PATH or config
    python scripts/run_server.py --pdf docs/manual.pdf  # Explicit document
    python scripts/run_server.py --config path/to/config.json
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pdf_reader.server.mcp_server import main


if __name__ == "__main__":
    sys.exit(main())
