"""Allow ``python -m tinymlp``."""

from .cli import main

if __name__ == "__main__":
    main()
