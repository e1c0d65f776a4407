import sys

from stackage_freeze.cli import main

if __name__ == "__main__":
    sys.exit(main())
