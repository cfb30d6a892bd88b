"""Allow ``python -m odmatrix``."""

from odmatrix.cli import main

if __name__ == "__main__":
    main()
