import sys

from google_search_mcp.server import main

if __name__ == "__main__":
    sys.exit(main())
