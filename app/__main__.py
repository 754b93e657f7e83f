"""Main password chain module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys

from password_check import main

if __name__ == "__main__":
    sys.exit(main())
