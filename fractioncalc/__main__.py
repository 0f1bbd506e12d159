import sys

from fractioncalc.run import main

if __name__ == "__main__":
    sys.exit(main())
