"""Package entry point for ``python -m truecaser``.

WHY: Users run ``python -m truecaser train ...`` or
``python -m truecaser truecase ...`` without installing the console script.
"""

from truecaser.cli import main

if __name__ == "__main__":
    main()
