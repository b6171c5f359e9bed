"""Package entry point for ``python -m cg_stream``."""

from cg_stream.cli import main

if __name__ == "__main__":
    main()
