import sys

from monadplay.starter import main

if __name__ == "__main__":
    sys.exit(main())
