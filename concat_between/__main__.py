"""Package entry point for ``python -m concat_between``.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
HTTP server with uvicorn. Otherwise, delegates to the CLI's main().
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from concat_between.server.app import serve
        serve()
    else:
        from concat_between.cli import main
        main()
