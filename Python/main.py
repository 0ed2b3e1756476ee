import os
import sys

# Ensure we can import the zset package
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from zset.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
