"""Main module for swift_news MCP server.

This module allows the server to be run as a Python module using:
python -m swift_news

It delegates to the server application's main function.
"""

from swift_news.server.app import main

if __name__ == "__main__":
    main()
